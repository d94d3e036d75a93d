"""
vegakit - 에러 유틸리티
라이브러리 예외 정의 및 사용자 친화적 에러 분류
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """에러 카테고리"""
    VALIDATION = "validation"        # 입력 검증 실패
    NOT_FOUND = "not_found"          # 등록되지 않은 차트 타입
    OUTPUT = "output"                # 문서 출력(파일 쓰기) 실패
    INTERNAL = "internal"            # 내부 오류


class VegaKitError(Exception):
    """vegakit 기본 예외"""
    error_key = "internal_error"


class DuplicateKeyError(VegaKitError, ValueError):
    """JSONDict 생성 시 같은 키가 두 번 전달됨"""
    error_key = "duplicate_key"

    def __init__(self, key: str):
        super().__init__(f"Duplicate key in JSONDict: {key!r}")
        self.key = key


class UnknownChartTypeError(VegaKitError, ValueError):
    """레지스트리에 없는 차트 타입"""
    error_key = "unknown_chart_type"

    def __init__(self, chart_type: Any):
        super().__init__(f"Unsupported chart type: {chart_type}")
        self.chart_type = chart_type


class InvalidDataPointError(VegaKitError, ValueError):
    """데이터 포인트 문자열 파싱 실패"""
    error_key = "invalid_data_point"

    def __init__(self, raw: str, reason: str):
        super().__init__(f"Invalid data point {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


@dataclass
class UserFriendlyError:
    """사용자 친화적 에러"""
    category: ErrorCategory
    message_ko: str
    message_en: str
    suggestion_ko: Optional[str] = None
    suggestion_en: Optional[str] = None
    technical_detail: Optional[str] = None
    exit_code: int = 1


# 에러 메시지 매핑
ERROR_MESSAGES: Dict[str, UserFriendlyError] = {
    "unknown_chart_type": UserFriendlyError(
        category=ErrorCategory.NOT_FOUND,
        message_ko="지원하지 않는 차트 타입입니다.",
        message_en="Unsupported chart type.",
        suggestion_ko="bar 또는 area 중 하나를 선택해 주세요.",
        suggestion_en="Choose one of: bar, area.",
        exit_code=2,
    ),
    "invalid_data_point": UserFriendlyError(
        category=ErrorCategory.VALIDATION,
        message_ko="데이터 포인트 형식이 올바르지 않습니다.",
        message_en="Invalid data point format.",
        suggestion_ko="KEY=VALUE 형식(예: A=28)으로 입력해 주세요.",
        suggestion_en="Use the KEY=VALUE form (e.g. A=28).",
        exit_code=2,
    ),
    "duplicate_key": UserFriendlyError(
        category=ErrorCategory.VALIDATION,
        message_ko="같은 키가 중복되었습니다.",
        message_en="Duplicate key in record.",
        exit_code=1,
    ),
    "output_error": UserFriendlyError(
        category=ErrorCategory.OUTPUT,
        message_ko="차트 문서를 저장하지 못했습니다.",
        message_en="Failed to write the chart document.",
        suggestion_ko="출력 경로와 권한을 확인해 주세요.",
        suggestion_en="Check the output path and its permissions.",
        exit_code=1,
    ),
}


def classify_error(exception: Exception) -> UserFriendlyError:
    """
    예외를 분류하여 사용자 친화적 에러로 변환

    Args:
        exception: 발생한 예외

    Returns:
        UserFriendlyError (technical_detail에 원본 메시지 포함)
    """
    if isinstance(exception, VegaKitError) and exception.error_key in ERROR_MESSAGES:
        base = ERROR_MESSAGES[exception.error_key]
    elif isinstance(exception, OSError):
        base = ERROR_MESSAGES["output_error"]
    else:
        logger.debug("Unclassified error: %s", type(exception).__name__)
        base = UserFriendlyError(
            category=ErrorCategory.INTERNAL,
            message_ko="예기치 않은 오류가 발생했습니다.",
            message_en="An unexpected error occurred.",
            suggestion_ko="문제가 지속되면 관리자에게 문의하세요.",
            suggestion_en="If the problem persists, please contact the administrator.",
        )

    return UserFriendlyError(
        category=base.category,
        message_ko=base.message_ko,
        message_en=base.message_en,
        suggestion_ko=base.suggestion_ko,
        suggestion_en=base.suggestion_en,
        technical_detail=str(exception),
        exit_code=base.exit_code,
    )


def format_error_response(
    error: UserFriendlyError,
    lang: str = "ko",
    include_technical: bool = False,
) -> Dict[str, Any]:
    """
    에러를 출력용 딕셔너리로 포맷

    Args:
        error: UserFriendlyError
        lang: 언어 (ko 또는 en)
        include_technical: 기술적 세부사항 포함 여부

    Returns:
        에러 응답 딕셔너리
    """
    is_korean = lang.lower().startswith("ko")

    response = {
        "error": {
            "category": error.category.value,
            "message": error.message_ko if is_korean else error.message_en,
        }
    }

    suggestion = error.suggestion_ko if is_korean else error.suggestion_en
    if suggestion:
        response["error"]["suggestion"] = suggestion

    if include_technical and error.technical_detail:
        response["error"]["detail"] = error.technical_detail

    return response
