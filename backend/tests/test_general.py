"""
공통 요소 테스트

KeyVal / QualKeyVal / JSONDict / Orientation 직렬화 테스트
"""

import json

import pytest
from pydantic import ValidationError

from vegakit.schemas.general import JSONDict, KeyVal, Orientation, QualKeyVal
from vegakit.utils.errors import DuplicateKeyError


class TestKeyVal:
    """KeyVal 테스트"""

    def test_serializes_single_field(self):
        """{ key: val } 단일 필드"""
        kv = KeyVal.new("value", "steelblue")

        assert kv.serialize() == {"value": "steelblue"}

    def test_is_immutable(self):
        """생성 후 변경 불가"""
        kv = KeyVal.new("signal", "interpolate")

        with pytest.raises(ValidationError):
            kv.val = "other"

    def test_json_output(self):
        """JSON 문자열 출력"""
        assert json.dumps(KeyVal.new("data", "table").serialize()) == '{"data": "table"}'


class TestQualKeyVal:
    """QualKeyVal 테스트"""

    def test_serializes_float_value(self):
        """실수 값 유지"""
        qkv = QualKeyVal.new("value", 0.5)

        assert qkv.serialize() == {"value": 0.5}

    def test_integer_input_becomes_float(self):
        """정수 입력은 실수로 저장"""
        qkv = QualKeyVal.new("value", 1)

        assert isinstance(qkv.val, float)
        assert qkv.serialize() == {"value": 1.0}


class TestJSONDict:
    """JSONDict 테스트"""

    def test_create_two_strings(self):
        """create: 문자열 두 개, 다른 필드 없음"""
        d = JSONDict.create("a", "1", "b", "2")

        assert d.serialize() == {"a": "1", "b": "2"}

    def test_create_keeps_string_values(self):
        """숫자처럼 보이는 문자열도 문자열로 유지"""
        serialized = JSONDict.create("a", "1", "b", "2").serialize()

        assert isinstance(serialized["a"], str)
        assert isinstance(serialized["b"], str)

    def test_band_create(self):
        """band_create: 문자열 + 정수"""
        d = JSONDict.band_create("scale", "xscale", "band", 1)

        assert d.serialize() == {"scale": "xscale", "band": 1}
        assert isinstance(d.serialize()["band"], int)

    def test_tri_create(self):
        """tri_create: 문자열 + 정수 두 개"""
        d = JSONDict.tri_create("scale", "xscale", "band", 1, "offset", -1)

        assert d.serialize() == {"scale": "xscale", "band": 1, "offset": -1}

    def test_insertion_order_is_stable(self):
        """삽입 순서대로 출력"""
        d = JSONDict.tri_create("scale", "yscale", "value", 0, "offset", 2)

        assert list(d.serialize().keys()) == ["scale", "value", "offset"]
        assert d.keys == ("scale", "value", "offset")
        assert json.dumps(d.serialize()) == json.dumps(d.serialize())

    def test_duplicate_key_rejected(self):
        """같은 키 두 번은 거부"""
        with pytest.raises(DuplicateKeyError) as exc_info:
            JSONDict.create("data", "table", "data", "other")

        assert exc_info.value.key == "data"

    def test_duplicate_key_in_tri_create(self):
        """tri_create 중복 키"""
        with pytest.raises(ValueError):
            JSONDict.tri_create("scale", "xscale", "band", 1, "band", 2)

    def test_constructor_rejects_duplicate_keys(self):
        """생성자 직접 호출도 중복 키 거부"""
        with pytest.raises(DuplicateKeyError) as exc_info:
            JSONDict(entries=(("a", "1"), ("a", "2")))

        assert exc_info.value.key == "a"

    def test_constructor_rejects_empty_record(self):
        """빈 레코드 생성 불가"""
        with pytest.raises(ValidationError):
            JSONDict()

        with pytest.raises(ValidationError):
            JSONDict(entries=(("a", "1"),))

    def test_band_create_rejects_fractional_value(self):
        """정수 자리에 실수 전달 시 거부 (버림 없음)"""
        with pytest.raises(ValidationError):
            JSONDict.band_create("scale", "xscale", "band", 0.5)

    def test_tri_create_rejects_none_and_bool(self):
        """None / bool 값은 문자열/정수로 변환되지 않음"""
        with pytest.raises(ValidationError):
            JSONDict.tri_create("scale", None, "band", 1, "offset", -1)

        with pytest.raises(ValidationError):
            JSONDict.tri_create("scale", "xscale", "band", True, "offset", -1)

    def test_create_rejects_integer_for_string(self):
        """create 는 문자열 값만 허용"""
        with pytest.raises(ValidationError):
            JSONDict.create("data", "table", "field", 1)

    def test_nested_in_json(self):
        """JSON 문자열 출력"""
        d = JSONDict.band_create("scale", "yscale", "value", 0)

        assert json.loads(json.dumps(d.serialize())) == {"scale": "yscale", "value": 0}


class TestOrientation:
    """Orientation 테스트"""

    @pytest.mark.parametrize(
        "orientation,expected",
        [
            (Orientation.TOP, "top"),
            (Orientation.LEFT, "left"),
            (Orientation.BOTTOM, "bottom"),
            (Orientation.RIGHT, "right"),
        ],
    )
    def test_lowercase_values(self, orientation, expected):
        """소문자 값"""
        assert orientation.value == expected

    def test_not_declared_case(self):
        """선언 이름(대문자)이 아닌 값으로 직렬화"""
        from vegakit.schemas.bar_chart import BarChartAxis

        serialized = json.dumps(BarChartAxis(orient=Orientation.RIGHT, scale="yscale").serialize())

        assert '"right"' in serialized
        assert "RIGHT" not in serialized
        assert "Orientation" not in serialized
