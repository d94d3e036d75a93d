"""
Vega 문서 요소 스키마 (Pydantic 모델)
"""

from .area_chart import (
    AreaChartAxis,
    AreaChartData,
    AreaChartDataEntry,
    AreaChartMark,
    AreaChartScale,
    AreaChartSignal,
    SignalBinding,
)
from .bar_chart import (
    BarChartAxis,
    BarChartData,
    BarChartMark,
    BarChartScale,
    BarChartValue,
)
from .general import (
    DEFAULT_SERIES_NAME,
    JSONDict,
    KeyVal,
    Orientation,
    QualKeyVal,
    VegaElement,
)

__all__ = [
    # Area Chart
    "AreaChartAxis",
    "AreaChartData",
    "AreaChartDataEntry",
    "AreaChartMark",
    "AreaChartScale",
    "AreaChartSignal",
    "SignalBinding",
    # Bar Chart
    "BarChartAxis",
    "BarChartData",
    "BarChartMark",
    "BarChartScale",
    "BarChartValue",
    # General
    "DEFAULT_SERIES_NAME",
    "JSONDict",
    "KeyVal",
    "Orientation",
    "QualKeyVal",
    "VegaElement",
]
