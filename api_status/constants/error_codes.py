# HTTP 状态码规范与默认提示信息
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Union

from api_status.utils.exceptions import ConfigurationError, UnknownErrorCodeError
from api_status.utils.logging_config import get_logger

logger = get_logger(__name__)


class ErrorCode(IntEnum):
    """Standard HTTP status codes used for API responses."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    PAYLOAD_TOO_LARGE = 413
    UNSUPPORTED_MEDIA_TYPE = 415
    VALIDATION_ERROR = 422  # well-formed but semantically invalid
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


# code 到默认 message 的映射
ERROR_MESSAGES: Mapping[ErrorCode, str] = MappingProxyType({
    ErrorCode.OK: "Request succeeded",
    ErrorCode.CREATED: "Resource created successfully",
    ErrorCode.NO_CONTENT: "Request succeeded, no content to return",
    ErrorCode.BAD_REQUEST: "Bad request. Please check your input.",
    ErrorCode.UNAUTHORIZED: "Unauthorized. Please log in.",
    ErrorCode.PAYMENT_REQUIRED: "Payment required.",
    ErrorCode.FORBIDDEN: "Forbidden. You do not have access.",
    ErrorCode.NOT_FOUND: "Resource not found.",
    ErrorCode.METHOD_NOT_ALLOWED: "Method not allowed.",
    ErrorCode.REQUEST_TIMEOUT: "Request timeout.",
    ErrorCode.CONFLICT: "Conflict. This already exists.",
    ErrorCode.GONE: "Resource is gone and will not be available again.",
    ErrorCode.PAYLOAD_TOO_LARGE: "Request payload too large.",
    ErrorCode.UNSUPPORTED_MEDIA_TYPE: "Unsupported media type.",
    ErrorCode.VALIDATION_ERROR: "Validation failed.",
    ErrorCode.TOO_MANY_REQUESTS: "Too many requests. Please try again later.",
    ErrorCode.INTERNAL_SERVER_ERROR: "Internal server error.",
    ErrorCode.NOT_IMPLEMENTED: "Feature not implemented.",
    ErrorCode.BAD_GATEWAY: "Bad gateway.",
    ErrorCode.SERVICE_UNAVAILABLE: "Service unavailable.",
    ErrorCode.GATEWAY_TIMEOUT: "Gateway timeout.",
})


def check_catalog(codes=ErrorCode, messages: Mapping = ERROR_MESSAGES) -> None:
    """
    校验消息表是否完整覆盖枚举

    Raises:
        ConfigurationError: 存在缺失或多余的条目
    """
    missing = [code for code in codes if code not in messages]
    extra = [key for key in messages if key not in set(codes)]
    if missing or extra:
        raise ConfigurationError(
            f"Error message table out of sync: missing={missing}, extra={extra}"
        )


check_catalog()


def to_error_code(code: Union[ErrorCode, int]) -> ErrorCode:
    """Coerce ``code`` to a catalog member, failing loudly on foreign values."""
    try:
        return ErrorCode(code)
    except ValueError:
        logger.error(f"未知的错误码: {code!r}")
        raise UnknownErrorCodeError(code) from None


def message_for(code: Union[ErrorCode, int]) -> str:
    """
    获取错误码对应的默认提示信息

    Args:
        code: ErrorCode 成员或与其数值相等的 int

    Returns:
        str: 默认提示信息

    Raises:
        UnknownErrorCodeError: code 不在枚举中
    """
    return ERROR_MESSAGES[to_error_code(code)]
