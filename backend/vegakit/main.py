"""
vegakit CLI

Usage:
    vegakit --type bar --point A=28 --point B=55 --output chart.json
    vegakit --type area --point 1=28 --point 2=43 --width 400 --height 200
"""
import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, Tuple, Union

from .config import settings
from .services.base_chart import BaseChart
from .services.chart_registry import ChartType, available_chart_types, create_chart
from .services.chart_writer import chart_to_json, write_chart
from .utils.errors import InvalidDataPointError, VegaKitError, classify_error, format_error_response

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """settings 기반 로깅 설정"""
    if settings.log_format == "json":
        logging.basicConfig(
            level=settings.log_level,
            format='{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}',
        )
    else:
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


def parse_point(chart_type: ChartType, raw: str) -> Tuple[Union[str, int], int]:
    """
    KEY=VALUE 문자열을 차트 타입에 맞는 데이터 포인트로 변환

    bar: (카테고리, 정수값), area: (정수 u, 정수 v)

    Raises:
        InvalidDataPointError: 형식 오류
    """
    key, sep, value = raw.rpartition("=")
    if not sep or not key:
        raise InvalidDataPointError(raw, "expected KEY=VALUE")

    try:
        amount = int(value)
    except ValueError:
        raise InvalidDataPointError(raw, f"value {value!r} is not an integer")

    if chart_type == ChartType.AREA:
        try:
            return int(key), amount
        except ValueError:
            raise InvalidDataPointError(raw, f"coordinate {key!r} is not an integer")

    return key, amount


def build_chart(
    chart_type: str,
    points: Sequence[str] = (),
    description: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    padding: Optional[int] = None,
) -> BaseChart:
    """CLI 인자로 차트 생성"""
    chart = create_chart(chart_type)
    kind = ChartType(chart_type)

    for raw in points:
        chart.add_data(*parse_point(kind, raw))

    if description is not None:
        chart.set_description(description)
    if width is not None or height is not None:
        chart.set_dimension(
            height=height if height is not None else chart.height,
            width=width if width is not None else chart.width,
        )
    if padding is not None:
        chart.set_padding(padding)

    return chart


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vegakit",
        description="Build a Vega visualization document",
    )
    parser.add_argument(
        "--type", "-t",
        dest="chart_type",
        default=ChartType.BAR.value,
        help=f"Chart type ({', '.join(available_chart_types())})",
    )
    parser.add_argument(
        "--point", "-p",
        dest="points",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Data point: CATEGORY=AMOUNT for bar, U=V for area (repeatable)",
    )
    parser.add_argument("--description", "-d", help="Chart description (title)")
    parser.add_argument("--width", type=int, help="Width in pixels")
    parser.add_argument("--height", type=int, help="Height in pixels")
    parser.add_argument("--padding", type=int, help="Padding in pixels")
    parser.add_argument("--output", "-o", help="Output file (stdout if omitted)")
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help=f"JSON indent (default: {settings.json_indent})",
    )
    parser.add_argument("--lang", choices=["ko", "en"], default="ko", help="Error message language")
    parser.add_argument("--verbose", "-v", action="store_true", help="Include error details")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        chart = build_chart(
            args.chart_type,
            points=args.points,
            description=args.description,
            width=args.width,
            height=args.height,
            padding=args.padding,
        )
        if args.output:
            write_chart(chart, args.output, indent=args.indent)
        else:
            sys.stdout.write(chart_to_json(chart, indent=args.indent) + "\n")
    except (VegaKitError, OSError) as e:
        error = classify_error(e)
        logger.error(f"vegakit failed: {e}")
        response = format_error_response(error, lang=args.lang, include_technical=args.verbose)
        sys.stderr.write(json.dumps(response, ensure_ascii=False) + "\n")
        return error.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
