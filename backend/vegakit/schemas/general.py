"""
Vega 공통 요소 스키마

- VegaElement: 모든 요소의 직렬화 규약 (Vega 필드명으로 출력)
- Orientation: 축 방향 (소문자로 직렬화)
- KeyVal / QualKeyVal: { key: value } 단일 필드 객체
- JSONDict: 문자열/정수 값이 섞인 고정 키 레코드
"""
from enum import Enum
from typing import Any, Dict, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationError,
    model_serializer,
    model_validator,
    validate_call,
)

from ..utils.errors import DuplicateKeyError

# 차트마다 하나만 존재하는 기본 데이터 시리즈 이름
DEFAULT_SERIES_NAME = "table"


class VegaElement(BaseModel):
    """Vega 문서 요소 기본 클래스 (생성 후 불변)"""
    model_config = ConfigDict(frozen=True)

    def serialize(self) -> Dict[str, Any]:
        """Vega 필드명(alias) 기준 JSON 호환 딕셔너리"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Orientation(str, Enum):
    """축 방향"""
    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"


class KeyVal(VegaElement):
    """{ key: val } 형태의 문자열 값 객체"""
    key: str
    val: str

    @classmethod
    def new(cls, key: str, val: str) -> "KeyVal":
        return cls(key=key, val=val)

    @model_serializer
    def _serialize(self) -> Dict[str, str]:
        return {self.key: self.val}


class QualKeyVal(VegaElement):
    """{ key: val } 형태의 실수 값 객체 (fillOpacity 등)"""
    key: str
    val: float

    @classmethod
    def new(cls, key: str, val: float) -> "QualKeyVal":
        return cls(key=key, val=val)

    @model_serializer
    def _serialize(self) -> Dict[str, float]:
        return {self.key: self.val}


class JSONDict(VegaElement):
    """
    문자열/정수 값이 섞인 평탄한 JSON 객체

    Vega 문서에서 반복되는 조각({"data": "table", "field": "u"},
    {"scale": "xscale", "band": 1} 등)을 표현합니다. 임의 삽입 API는 없고
    create / band_create / tri_create 팩토리로만 생성합니다.
    키는 삽입 순서대로 출력됩니다.

    Raises:
        DuplicateKeyError: 같은 키가 두 번 전달됨 (생성 경로와 무관)
        ValidationError: 값 타입 불일치 또는 항목 2개 미만
    """
    entries: Tuple[Tuple[StrictStr, Union[StrictStr, StrictInt]], ...] = Field(min_length=2)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            for error in e.errors():
                cause = error.get("ctx", {}).get("error")
                if isinstance(cause, DuplicateKeyError):
                    raise cause from None
            raise

    @model_validator(mode="after")
    def _check_unique_keys(self) -> "JSONDict":
        seen = set()
        for key, _ in self.entries:
            if key in seen:
                raise DuplicateKeyError(key)
            seen.add(key)
        return self

    @classmethod
    def _from_pairs(cls, *pairs: Tuple[str, Union[str, int]]) -> "JSONDict":
        return cls(entries=pairs)

    @classmethod
    @validate_call
    def create(cls, x_key: StrictStr, x_val: StrictStr, y_key: StrictStr, y_val: StrictStr):
        """문자열 값 두 개"""
        return cls._from_pairs((x_key, x_val), (y_key, y_val))

    @classmethod
    @validate_call
    def band_create(cls, x_key: StrictStr, x_val: StrictStr, y_key: StrictStr, y_val: StrictInt):
        """문자열 값 하나 + 정수 값 하나 (band, value 등)"""
        return cls._from_pairs((x_key, x_val), (y_key, y_val))

    @classmethod
    @validate_call
    def tri_create(
        cls,
        x_key: StrictStr,
        x_val: StrictStr,
        y_key: StrictStr,
        y_val: StrictInt,
        z_key: StrictStr,
        z_val: StrictInt,
    ):
        """문자열 값 하나 + 정수 값 두 개"""
        return cls._from_pairs((x_key, x_val), (y_key, y_val), (z_key, z_val))

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key, _ in self.entries)

    @model_serializer
    def _serialize(self) -> Dict[str, Union[str, int]]:
        return {key: value for key, value in self.entries}
