"""
Base Chart

차트 문서 빌더 공통 기반 클래스.
요소 벡터(data / scales / axes / marks)를 소유하고 빌더 API와
최상위 직렬화 규약(필드 순서 고정)을 제공합니다.
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..config import settings
from ..schemas.general import VegaElement

logger = logging.getLogger(__name__)


class BaseChart(ABC):
    """
    차트 문서 빌더

    생성자가 기본값으로 채워진 완전한 인스턴스를 만들고, 이후에는
    add_data / set_* / clear_data 로만 변경됩니다.
    """

    def __init__(
        self,
        identifier: str,
        description: str,
        width: int,
        height: int,
        padding: int,
        data: Sequence[VegaElement],
        scales: Sequence[VegaElement],
        axes: Sequence[VegaElement],
        marks: Sequence[VegaElement],
        signals: Optional[Sequence[VegaElement]] = None,
    ):
        self._identifier = identifier
        self._description = description
        self._width = width
        self._height = height
        self._padding = padding

        self._signals: List[VegaElement] = list(signals or [])
        self._data: List[Any] = list(data)
        self._scales: List[VegaElement] = list(scales)
        self._axes: List[VegaElement] = list(axes)
        self._marks: List[VegaElement] = list(marks)

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def description(self) -> str:
        """렌더러가 차트 제목으로 사용하는 설명"""
        return self._description

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def padding(self) -> int:
        return self._padding

    @property
    def data_count(self) -> int:
        """기본 데이터 시리즈의 포인트 수"""
        return len(self._data[0].values)

    @abstractmethod
    def add_data(self, *args: Any) -> None:
        """기본 데이터 시리즈에 포인트 하나 추가"""

    def set_description(self, description: str) -> None:
        self._description = description

    def set_dimension(self, *, height: int, width: int) -> None:
        """
        차트 크기 설정

        Args:
            height: 높이 (px)
            width: 너비 (px)
        """
        self._height = height
        self._width = width
        logger.debug("%s dimension set: height=%s width=%s", self._identifier, height, width)

    def set_padding(self, padding: int) -> None:
        """차트 주변 여백 (px)"""
        self._padding = padding

    def clear_data(self) -> None:
        """데이터 포인트 전체 삭제 (시리즈 이름 유지)"""
        self._data[0].clear()
        logger.debug("%s data cleared", self._identifier)

    def serialize(self) -> Dict[str, Any]:
        """
        Vega 문서 생성

        필드 순서: $schema, width, height, padding, (signals), data, scales, axes, marks

        Returns:
            JSON 직렬화 가능한 딕셔너리
        """
        document: Dict[str, Any] = {
            "$schema": settings.vega_schema_url,
            "width": self._width,
            "height": self._height,
            "padding": self._padding,
        }
        if self._signals:
            document["signals"] = [signal.serialize() for signal in self._signals]
        document["data"] = [series.serialize() for series in self._data]
        document["scales"] = [scale.serialize() for scale in self._scales]
        document["axes"] = [axis.serialize() for axis in self._axes]
        document["marks"] = [mark.serialize() for mark in self._marks]
        return document

    def to_json(self, indent: Optional[int] = None) -> str:
        """Vega 문서를 JSON 문자열로 변환"""
        return json.dumps(self.serialize(), indent=indent, ensure_ascii=False)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(identifier={self._identifier!r}, "
            f"width={self._width}, height={self._height}, points={self.data_count})"
        )
