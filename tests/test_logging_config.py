import logging
from logging.handlers import RotatingFileHandler

import pytest

from api_status.config import Settings
from api_status.utils.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _own_handlers(root):
    return [h for h in root.handlers if getattr(h, "_api_status_handler", False)]


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.DEBUG is False
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_DIR is None


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("API_STATUS_DEBUG", "true")
    monkeypatch.setenv("API_STATUS_LOG_DIR", str(tmp_path))
    settings = Settings(_env_file=None)
    assert settings.DEBUG is True
    assert settings.LOG_DIR == tmp_path


def test_setup_logging_console_only(restore_root_logger):
    root = setup_logging(Settings(_env_file=None, LOG_LEVEL="warning"))
    assert root.level == logging.WARNING
    assert len(_own_handlers(root)) == 1


def test_setup_logging_is_idempotent(restore_root_logger):
    settings = Settings(_env_file=None)
    setup_logging(settings)
    root = setup_logging(settings)
    assert len(_own_handlers(root)) == 1


def test_setup_logging_debug_overrides_level(restore_root_logger):
    root = setup_logging(Settings(_env_file=None, DEBUG=True, LOG_LEVEL="ERROR"))
    assert root.level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger):
    root = setup_logging(Settings(_env_file=None, LOG_LEVEL="chatty"))
    assert root.level == logging.INFO


def test_setup_logging_writes_files(restore_root_logger, tmp_path):
    root = setup_logging(Settings(_env_file=None, LOG_DIR=tmp_path))
    file_handlers = [h for h in _own_handlers(root) if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 2

    get_logger("api_status.test").error("boom")
    for handler in file_handlers:
        handler.flush()

    assert "boom" in (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "boom" in (tmp_path / "error.log").read_text(encoding="utf-8")


def test_get_logger_returns_named_logger():
    assert get_logger("api_status.x").name == "api_status.x"
