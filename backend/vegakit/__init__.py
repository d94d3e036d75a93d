"""
vegakit - Vega 시각화 문서 빌더
"""

__version__ = "0.1.0"

from .schemas.general import JSONDict, KeyVal, Orientation, QualKeyVal
from .services.area_chart import AreaChart
from .services.bar_chart import BarChart
from .services.base_chart import BaseChart
from .services.chart_registry import ChartType, available_chart_types, create_chart
from .services.chart_writer import chart_to_json, write_chart

__all__ = [
    # Elements
    "JSONDict",
    "KeyVal",
    "Orientation",
    "QualKeyVal",
    # Charts
    "AreaChart",
    "BarChart",
    "BaseChart",
    # Registry / Output
    "ChartType",
    "available_chart_types",
    "create_chart",
    "chart_to_json",
    "write_chart",
]
