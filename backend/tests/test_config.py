"""
Settings 테스트
"""

from vegakit.config import Settings


class TestSettings:
    """Settings 기본값 및 환경변수 테스트"""

    def test_defaults(self, monkeypatch):
        """기본값"""
        for name in ("VEGAKIT_VEGA_SCHEMA_URL", "VEGAKIT_JSON_INDENT", "VEGAKIT_LOG_LEVEL", "VEGAKIT_LOG_FORMAT"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.vega_schema_url == "https://vega.github.io/schema/vega/v3.0.json"
        assert config.json_indent == 2
        assert config.log_level == "INFO"
        assert config.log_format == "text"

    def test_env_override(self, monkeypatch):
        """VEGAKIT_ 접두사 환경변수"""
        monkeypatch.setenv("VEGAKIT_VEGA_SCHEMA_URL", "https://vega.github.io/schema/vega/v5.json")
        monkeypatch.setenv("VEGAKIT_JSON_INDENT", "4")

        config = Settings(_env_file=None)

        assert config.vega_schema_url == "https://vega.github.io/schema/vega/v5.json"
        assert config.json_indent == 4

    def test_log_level_is_upper_cased(self, monkeypatch):
        """소문자 로그 레벨도 logging 에서 사용할 수 있도록 정규화"""
        monkeypatch.setenv("VEGAKIT_LOG_LEVEL", "info")

        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
