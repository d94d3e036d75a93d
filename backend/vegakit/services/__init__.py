"""
차트 빌더 서비스
"""

from .area_chart import AreaChart
from .bar_chart import BarChart
from .base_chart import BaseChart
from .chart_registry import CHART_FACTORIES, ChartType, available_chart_types, create_chart
from .chart_writer import chart_to_json, write_chart

__all__ = [
    "AreaChart",
    "BarChart",
    "BaseChart",
    "CHART_FACTORIES",
    "ChartType",
    "available_chart_types",
    "create_chart",
    "chart_to_json",
    "write_chart",
]
