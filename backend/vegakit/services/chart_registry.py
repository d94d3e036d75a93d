"""
Chart Registry
차트 타입별 생성 팩토리 레지스트리
"""
import logging
from enum import Enum
from typing import Callable, Dict, List, Union

from ..utils.errors import UnknownChartTypeError
from .area_chart import AreaChart
from .bar_chart import BarChart
from .base_chart import BaseChart

logger = logging.getLogger(__name__)


class ChartType(str, Enum):
    """지원 차트 타입"""
    BAR = "bar"
    AREA = "area"


CHART_FACTORIES: Dict[ChartType, Callable[[], BaseChart]] = {
    ChartType.BAR: BarChart,
    ChartType.AREA: AreaChart,
}


def available_chart_types() -> List[str]:
    """등록된 차트 타입 목록"""
    return [chart_type.value for chart_type in CHART_FACTORIES]


def create_chart(chart_type: Union[ChartType, str]) -> BaseChart:
    """
    기본값으로 채워진 차트 생성

    Args:
        chart_type: 차트 타입 (ChartType 또는 "bar" / "area")

    Returns:
        새 차트 인스턴스

    Raises:
        UnknownChartTypeError: 등록되지 않은 타입
    """
    try:
        key = ChartType(chart_type)
    except ValueError as e:
        raise UnknownChartTypeError(chart_type) from e

    chart = CHART_FACTORIES[key]()
    logger.debug("Created %s chart", key.value)
    return chart
