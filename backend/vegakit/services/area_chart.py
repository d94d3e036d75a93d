"""
Area Chart 빌더
"""
import logging

from ..schemas.area_chart import (
    AreaChartAxis,
    AreaChartData,
    AreaChartDataEntry,
    AreaChartMark,
    AreaChartScale,
    AreaChartSignal,
)
from .base_chart import BaseChart

logger = logging.getLogger(__name__)


class AreaChart(BaseChart):
    """
    연속 좌표 영역 차트

    데이터 형식: (u, v) - x축 좌표와 y축 값.
    interpolate 시그널로 보간 방식을 선택할 수 있습니다.
    """

    def __init__(self):
        super().__init__(
            identifier="areachart",
            description="An area chart",
            width=500,
            height=200,
            padding=5,
            signals=[AreaChartSignal.default()],
            data=[AreaChartData.new()],
            scales=[AreaChartScale.default_x(), AreaChartScale.default_y()],
            axes=[AreaChartAxis.create_xaxis(), AreaChartAxis.create_yaxis()],
            marks=[AreaChartMark.create_mark()],
        )

    def add_data(self, u: int, v: int) -> None:
        """
        좌표 추가

        Args:
            u: x축 좌표
            v: y축 값
        """
        self._data[0].push(AreaChartDataEntry(u=u, v=v))
        logger.debug("areachart add_data: u=%s v=%s", u, v)
