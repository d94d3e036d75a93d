"""
Area Chart 요소 스키마

area 차트 문서를 구성하는 시그널, 데이터 시리즈, 스케일, 축, 마크의 기본값 팩토리
"""
from typing import List, Tuple

from pydantic import ConfigDict, Field

from .general import (
    DEFAULT_SERIES_NAME,
    JSONDict,
    KeyVal,
    Orientation,
    QualKeyVal,
    VegaElement,
)

INTERPOLATE_OPTIONS = ("basis", "cardinal", "linear", "monotone")


class SignalBinding(VegaElement):
    """시그널 입력 위젯 바인딩"""
    input: str
    options: Tuple[str, ...]

    @classmethod
    def default(cls) -> "SignalBinding":
        return cls(input="select", options=INTERPOLATE_OPTIONS)


class AreaChartSignal(VegaElement):
    """보간 방식 선택 시그널"""
    name: str
    value: str
    bind: SignalBinding

    @classmethod
    def default(cls) -> "AreaChartSignal":
        return cls(name="interpolate", value="monotone", bind=SignalBinding.default())


class AreaChartDataEntry(VegaElement):
    """연속 좌표 한 점 (u, v)"""
    u: int
    v: int


class AreaChartData(VegaElement):
    """데이터 시리즈 (삽입 순서 유지)"""
    model_config = ConfigDict(frozen=False)

    name: str = DEFAULT_SERIES_NAME
    values: List[AreaChartDataEntry] = Field(default_factory=list)

    @classmethod
    def new(cls) -> "AreaChartData":
        return cls()

    def push(self, entry: AreaChartDataEntry) -> None:
        self.values.append(entry)

    def clear(self) -> None:
        self.values.clear()


class AreaChartScale(VegaElement):
    """스케일 설정"""
    name: str
    scale_type: str = Field(serialization_alias="type")
    range: str
    zero: bool
    domain: JSONDict

    @classmethod
    def default_x(cls) -> "AreaChartScale":
        return cls(
            name="xscale",
            scale_type="linear",
            range="width",
            zero=False,
            domain=JSONDict.create("data", DEFAULT_SERIES_NAME, "field", "u"),
        )

    @classmethod
    def default_y(cls) -> "AreaChartScale":
        return cls(
            name="yscale",
            scale_type="linear",
            range="height",
            zero=True,
            domain=JSONDict.create("data", DEFAULT_SERIES_NAME, "field", "v"),
        )


class AreaChartAxis(VegaElement):
    """축 설정"""
    orient: Orientation
    scale: str

    @classmethod
    def create_xaxis(cls) -> "AreaChartAxis":
        return cls(orient=Orientation.BOTTOM, scale="xscale")

    @classmethod
    def create_yaxis(cls) -> "AreaChartAxis":
        return cls(orient=Orientation.LEFT, scale="yscale")


class AreaChartEnter(VegaElement):
    x: JSONDict
    y: JSONDict
    y2: JSONDict
    fill: KeyVal


class AreaChartUpdate(VegaElement):
    interpolate: KeyVal
    fill_opacity: QualKeyVal = Field(serialization_alias="fillOpacity")


class AreaChartHover(VegaElement):
    fill_opacity: QualKeyVal = Field(serialization_alias="fillOpacity")


class AreaChartEncoding(VegaElement):
    """enter / update / hover 인코딩"""
    enter: AreaChartEnter
    update: AreaChartUpdate
    hover: AreaChartHover


class AreaChartMark(VegaElement):
    """area 마크"""
    mark_type: str = Field(serialization_alias="type")
    from_: KeyVal = Field(serialization_alias="from")
    encode: AreaChartEncoding

    @classmethod
    def create_mark(cls) -> "AreaChartMark":
        return cls(
            mark_type="area",
            from_=KeyVal.new("data", DEFAULT_SERIES_NAME),
            encode=AreaChartEncoding(
                enter=AreaChartEnter(
                    x=JSONDict.create("scale", "xscale", "field", "u"),
                    y=JSONDict.create("scale", "yscale", "field", "v"),
                    y2=JSONDict.band_create("scale", "yscale", "value", 0),
                    fill=KeyVal.new("value", "steelblue"),
                ),
                update=AreaChartUpdate(
                    interpolate=KeyVal.new("signal", "interpolate"),
                    fill_opacity=QualKeyVal.new("value", 1.0),
                ),
                hover=AreaChartHover(fill_opacity=QualKeyVal.new("value", 0.5)),
            ),
        )
