"""
Bar Chart 요소 스키마

bar 차트 문서를 구성하는 데이터 시리즈, 스케일, 축, 마크의 기본값 팩토리
"""
from typing import List, Optional

from pydantic import ConfigDict, Field

from .general import DEFAULT_SERIES_NAME, JSONDict, KeyVal, Orientation, VegaElement


class BarChartValue(VegaElement):
    """막대 하나: 카테고리 + 값(높이)"""
    category: str
    amount: int

    @classmethod
    def new(cls, category: str, amount: int) -> "BarChartValue":
        return cls(category=category, amount=amount)


class BarChartData(VegaElement):
    """데이터 시리즈 (삽입 순서 유지)"""
    model_config = ConfigDict(frozen=False)

    name: str = DEFAULT_SERIES_NAME
    values: List[BarChartValue] = Field(default_factory=list)

    @classmethod
    def new(cls) -> "BarChartData":
        return cls()

    def push(self, value: BarChartValue) -> None:
        self.values.append(value)

    def clear(self) -> None:
        self.values.clear()


class BarChartScale(VegaElement):
    """스케일 설정"""
    name: str
    scale_type: str = Field(serialization_alias="type")
    range: str
    padding: Optional[float] = None
    zero: Optional[bool] = None
    domain: JSONDict

    @classmethod
    def create_xscale(cls) -> "BarChartScale":
        return cls(
            name="xscale",
            scale_type="band",
            range="width",
            padding=0.05,
            # band 스케일은 zero 속성이 없으므로 x축 기본값 zero: false 는 출력하지 않음
            domain=JSONDict.create("data", DEFAULT_SERIES_NAME, "field", "category"),
        )

    @classmethod
    def create_yscale(cls) -> "BarChartScale":
        return cls(
            name="yscale",
            scale_type="linear",
            range="height",
            zero=True,
            domain=JSONDict.create("data", DEFAULT_SERIES_NAME, "field", "amount"),
        )


class BarChartAxis(VegaElement):
    """축 설정"""
    orient: Orientation
    scale: str

    @classmethod
    def create_xaxis(cls) -> "BarChartAxis":
        return cls(orient=Orientation.BOTTOM, scale="xscale")

    @classmethod
    def create_yaxis(cls) -> "BarChartAxis":
        return cls(orient=Orientation.LEFT, scale="yscale")


class BarChartEnter(VegaElement):
    x: JSONDict
    width: JSONDict
    y: JSONDict
    y2: JSONDict


class BarChartUpdate(VegaElement):
    fill: KeyVal


class BarChartHover(VegaElement):
    fill: KeyVal


class BarChartEncoding(VegaElement):
    """enter / update / hover 인코딩"""
    enter: BarChartEnter
    update: BarChartUpdate
    hover: BarChartHover


class BarChartMark(VegaElement):
    """rect 마크"""
    mark_type: str = Field(serialization_alias="type")
    from_: KeyVal = Field(serialization_alias="from")
    encode: BarChartEncoding

    @classmethod
    def create_mark(cls) -> "BarChartMark":
        return cls(
            mark_type="rect",
            from_=KeyVal.new("data", DEFAULT_SERIES_NAME),
            encode=BarChartEncoding(
                enter=BarChartEnter(
                    x=JSONDict.create("scale", "xscale", "field", "category"),
                    # offset -1: 막대 사이 1px 간격
                    width=JSONDict.tri_create("scale", "xscale", "band", 1, "offset", -1),
                    y=JSONDict.create("scale", "yscale", "field", "amount"),
                    y2=JSONDict.band_create("scale", "yscale", "value", 0),
                ),
                update=BarChartUpdate(fill=KeyVal.new("value", "steelblue")),
                hover=BarChartHover(fill=KeyVal.new("value", "red")),
            ),
        )
