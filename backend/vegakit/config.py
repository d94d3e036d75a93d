"""
환경 설정 모듈
Pydantic Settings를 사용하여 환경변수(.env 포함)에서 설정을 로드합니다.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """vegakit 설정"""

    # Application
    app_name: str = "vegakit"
    app_version: str = "0.1.0"

    # Vega
    vega_schema_url: str = "https://vega.github.io/schema/vega/v3.0.json"

    # Output
    json_indent: int = 2

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """logging 모듈은 대문자 레벨 이름만 허용"""
        return value.strip().upper()

    class Config:
        env_prefix = "VEGAKIT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# 전역 설정 인스턴스
settings = Settings()
