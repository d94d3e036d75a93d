"""
Chart Writer
Vega 문서를 JSON 텍스트/파일로 출력
"""
import logging
from pathlib import Path
from typing import Optional, Union

from ..config import settings
from .base_chart import BaseChart

logger = logging.getLogger(__name__)


def chart_to_json(chart: BaseChart, indent: Optional[int] = None) -> str:
    """
    차트를 JSON 문자열로 변환

    Args:
        chart: 차트 인스턴스
        indent: 들여쓰기 (None이면 settings.json_indent)
    """
    if indent is None:
        indent = settings.json_indent
    return chart.to_json(indent=indent)


def write_chart(
    chart: BaseChart,
    path: Union[str, Path],
    indent: Optional[int] = None,
) -> Path:
    """
    차트 문서를 파일로 저장

    파일 쓰기 실패(OSError)는 그대로 전파됩니다.

    Args:
        chart: 차트 인스턴스
        path: 출력 경로 (상위 디렉토리는 자동 생성)
        indent: 들여쓰기

    Returns:
        저장된 파일 경로
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(chart_to_json(chart, indent=indent) + "\n", encoding="utf-8")
    logger.info(f"Chart '{chart.identifier}' written to {target}")
    return target
