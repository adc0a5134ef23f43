from api_status.constants.error_codes import ErrorCode, ERROR_MESSAGES, message_for
from api_status.models.response import Status
from api_status.utils.exceptions import (
    ConfigurationError,
    HttpError,
    StatusError,
    UnknownErrorCodeError,
    http_error,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "ERROR_MESSAGES",
    "ErrorCode",
    "HttpError",
    "Status",
    "StatusError",
    "UnknownErrorCodeError",
    "http_error",
    "message_for",
]
