"""Tests for the application logger utility.

The autouse ``isolated_dirs`` fixture already points user_log_dir at a temp
directory and resets the logger singleton between tests.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

from pomodoro_cli.utils.logger import get_logger


def test_get_logger_creates_log_file(isolated_dirs):
    """Logger creates the log file inside user_log_dir."""
    logger = get_logger()

    log_file = isolated_dirs / "logs" / "pomodoro.log"
    assert log_file.exists(), "Log file should be created on first use"
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    """Repeated calls return the same logger instance."""
    assert get_logger() is get_logger()


def test_get_logger_writes_message(isolated_dirs):
    """Messages written to the logger appear in the log file."""
    logger = get_logger()
    logger.info("hello from test")

    for handler in logger.handlers:
        handler.flush()

    content = (isolated_dirs / "logs" / "pomodoro.log").read_text()
    assert "hello from test" in content


def test_module_loggers_share_the_file(isolated_dirs):
    """Loggers named under pomodoro_cli propagate into the app handler."""
    logger = get_logger()
    logging.getLogger("pomodoro_cli.models.timer.machine").info("tick tock")

    for handler in logger.handlers:
        handler.flush()

    content = (isolated_dirs / "logs" / "pomodoro.log").read_text()
    assert "[pomodoro_cli.models.timer.machine] tick tock" in content


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("POMODORO_LOG_LEVEL", "debug")

    assert get_logger().level == logging.DEBUG


def test_unknown_level_defaults_to_info(monkeypatch):
    monkeypatch.setenv("POMODORO_LOG_LEVEL", "chatty")

    assert get_logger().level == logging.INFO


def test_does_not_propagate_to_root():
    assert get_logger().propagate is False


def test_get_logger_creates_parent_dirs(tmp_path):
    """Logger creates nested directories if they do not exist."""
    nested = tmp_path / "a" / "b" / "c"
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(nested)):
        get_logger()

    assert nested.is_dir()


def test_file_handler_added_alongside_existing_handlers(isolated_dirs):
    """A handler someone else attached does not stop the file handler."""
    other = logging.NullHandler()
    logging.getLogger("pomodoro_cli").addHandler(other)

    logger = get_logger()
    logger.info("still written")

    assert other in logger.handlers
    file_handlers = [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    content = (isolated_dirs / "logs" / "pomodoro.log").read_text()
    assert "still written" in content


def test_second_initialisation_keeps_one_file_handler(isolated_dirs):
    import pomodoro_cli.utils.logger as logger_mod

    get_logger()
    logger_mod._logger = None
    logger = get_logger()

    file_handlers = [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
