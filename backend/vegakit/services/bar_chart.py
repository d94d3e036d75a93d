"""
Bar Chart 빌더
"""
import logging

from ..schemas.bar_chart import (
    BarChartAxis,
    BarChartData,
    BarChartMark,
    BarChartScale,
    BarChartValue,
)
from .base_chart import BaseChart

logger = logging.getLogger(__name__)


class BarChart(BaseChart):
    """
    카테고리별 막대 차트

    데이터 형식: (카테고리, 값) - 막대 하나와 그 높이
    """

    def __init__(self):
        super().__init__(
            identifier="barchart",
            description="A barchart",
            width=500,
            height=300,
            padding=5,
            data=[BarChartData.new()],
            scales=[BarChartScale.create_xscale(), BarChartScale.create_yscale()],
            axes=[BarChartAxis.create_xaxis(), BarChartAxis.create_yaxis()],
            marks=[BarChartMark.create_mark()],
        )

    def add_data(self, category: str, amount: int) -> None:
        """
        막대 추가 (카테고리 중복 허용)

        Args:
            category: 막대 카테고리
            amount: 막대 높이
        """
        self._data[0].push(BarChartValue.new(category, amount))
        logger.debug("barchart add_data: %s=%s", category, amount)
