"""
유틸리티 모듈
"""
from .errors import (
    DuplicateKeyError,
    ErrorCategory,
    InvalidDataPointError,
    UnknownChartTypeError,
    UserFriendlyError,
    VegaKitError,
    classify_error,
    format_error_response,
)

__all__ = [
    "DuplicateKeyError",
    "ErrorCategory",
    "InvalidDataPointError",
    "UnknownChartTypeError",
    "UserFriendlyError",
    "VegaKitError",
    "classify_error",
    "format_error_response",
]
