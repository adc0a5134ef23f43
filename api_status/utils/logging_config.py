"""
集中式日志配置模块
库内模块只通过 get_logger 获取日志记录器，由调用方决定是否调用 setup_logging
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler


# 日志格式
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# 标记由本模块添加的处理器，重复调用时只替换这些处理器
_HANDLER_FLAG = '_api_status_handler'


def _file_handler(path: Path, level: int, formatter: logging.Formatter, settings) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(settings=None) -> logging.Logger:
    """
    配置日志系统

    日志输出：
    1. 控制台：LOG_LEVEL 及以上级别
    2. app.log：所有日志（仅当配置了 LOG_DIR）
    3. error.log：仅错误日志（仅当配置了 LOG_DIR）

    Args:
        settings: Settings 实例，默认使用全局配置

    Returns:
        logging.Logger: 根日志记录器
    """
    if settings is None:
        from api_status.config import settings

    root_logger = logging.getLogger()

    if settings.DEBUG:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    root_logger.setLevel(log_level)

    # 移除之前由本模块添加的处理器（避免重复配置）
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if settings.LOG_DIR is not None:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_file_handler(log_dir / 'app.log', log_level, formatter, settings))
        handlers.append(_file_handler(log_dir / 'error.log', logging.ERROR, formatter, settings))

    for handler in handlers:
        setattr(handler, _HANDLER_FLAG, True)
        root_logger.addHandler(handler)

    root_logger.debug(f"日志系统初始化完成, 日志级别: {logging.getLevelName(log_level)}")
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    获取指定名称的日志记录器

    Args:
        name: 日志记录器名称，通常使用 __name__

    Returns:
        logging.Logger: 日志记录器实例
    """
    return logging.getLogger(name)
