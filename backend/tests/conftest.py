"""
vegakit - Test Configuration
============================
pytest fixtures shared across chart builder tests
"""

import pytest

from vegakit.config import settings
from vegakit.services.area_chart import AreaChart
from vegakit.services.bar_chart import BarChart

VEGA_V3_SCHEMA = "https://vega.github.io/schema/vega/v3.0.json"


@pytest.fixture
def bar_chart():
    """기본값 BarChart"""
    return BarChart()


@pytest.fixture
def area_chart():
    """기본값 AreaChart"""
    return AreaChart()


@pytest.fixture(autouse=True)
def default_schema_url(monkeypatch):
    """환경변수와 무관하게 Vega v3 스키마 URL 고정"""
    monkeypatch.setattr(settings, "vega_schema_url", VEGA_V3_SCHEMA)
    monkeypatch.setattr(settings, "json_indent", 2)
