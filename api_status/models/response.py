from pydantic import BaseModel
from typing import TypeVar, Generic, Optional, Union

from api_status.constants.error_codes import ErrorCode, message_for, to_error_code
from api_status.utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

# 成功响应统一使用 201
SUCCESS_CODE = ErrorCode.CREATED


class Status(BaseModel, Generic[T]):
    """
    通用响应模型

    默认处于 400 错误状态，调用方忘记设置状态时不会误报成功。
    payload 为 None 表示没有数据，序列化为 null。

    示例:
        status = Status.ok("User created", {"id": 1})
        status = Status.from_error_code(ErrorCode.NOT_FOUND)

        status = Status[dict]()
        status.mark_success(message="Operation successful", payload={"id": 1})
    """
    code: int = int(ErrorCode.BAD_REQUEST)
    success: bool = False
    message: str = message_for(ErrorCode.BAD_REQUEST)
    payload: Optional[T] = None

    def _set(self, message: Optional[str] = None, payload: Optional[T] = None) -> "Status[T]":
        # 只更新传入的字段
        if message is not None:
            self.message = message
        if payload is not None:
            self.payload = payload
        return self

    def mark_success(self, message: Optional[str] = None, payload: Optional[T] = None) -> "Status[T]":
        """设置为成功状态，未传入的 message / payload 保持原值"""
        self.code = int(SUCCESS_CODE)
        self.success = True
        return self._set(message=message, payload=payload)

    def mark_error(self, error_code: Union[ErrorCode, int]) -> "Status[T]":
        """
        根据错误码设置错误状态，message 固定为该错误码的默认提示信息

        Raises:
            UnknownErrorCodeError: error_code 不在 ErrorCode 枚举中
        """
        code = to_error_code(error_code)
        self.code = int(code)
        self.success = False
        self.message = message_for(code)
        self.payload = None
        logger.debug(f"状态设置为错误: {self.code}")
        return self

    def adopt_custom_error(self, err) -> "Status[T]":
        """
        使用自定义错误（带 code 和 message，例如 HttpError）设置错误状态

        code 和 message 原样透传，不做校验。
        """
        self.success = False
        self.code = err.code
        self.message = err.message
        self.payload = None
        logger.debug(f"状态设置为自定义错误: {self.code}")
        return self

    def adopt_generic_failure(self, err: BaseException) -> "Status[T]":
        """
        将无法分类的异常统一转换为 500

        message 使用异常描述，描述为空时使用 500 的默认提示信息。
        """
        description = str(err)
        self.code = int(ErrorCode.INTERNAL_SERVER_ERROR)
        self.success = False
        self.message = description or message_for(ErrorCode.INTERNAL_SERVER_ERROR)
        self.payload = None
        logger.warning(f"未分类异常转换为 500: {type(err).__name__}")
        return self

    @classmethod
    def ok(cls, message: Optional[str] = None, payload: Optional[T] = None) -> "Status[T]":
        """创建成功状态"""
        return cls().mark_success(message=message, payload=payload)

    @classmethod
    def from_error_code(cls, error_code: Union[ErrorCode, int]) -> "Status[T]":
        """根据错误码创建错误状态"""
        return cls().mark_error(error_code)
