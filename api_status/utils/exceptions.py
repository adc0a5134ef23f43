from typing import Optional


class StatusError(Exception):
    """api_status 所有异常的基类"""


class ConfigurationError(StatusError):
    """错误码枚举与消息表不一致"""


class UnknownErrorCodeError(ConfigurationError, ValueError):
    """传入了不在 ErrorCode 枚举中的错误码"""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Unknown error code: {code!r}")


class HttpError(StatusError):
    """
    带 HTTP 状态码的自定义异常

    Status.adopt_custom_error 会原样使用 code 和 message，不校验 code 是否为标准 HTTP 状态码。
    """

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"HttpError(code={self.code!r}, message={self.message!r})"

    @classmethod
    def from_error_code(cls, error_code, message: Optional[str] = None) -> "HttpError":
        from api_status.constants.error_codes import message_for, to_error_code

        code = to_error_code(error_code)
        return cls(int(code), message if message is not None else message_for(code))


def http_error(error_code, message: Optional[str] = None):
    raise HttpError.from_error_code(error_code, message)


def http_404_error(message: str = "Resource not found."):
    raise HttpError(404, message)


def http_400_error(message: str = "Bad request. Please check your input."):
    raise HttpError(400, message)
