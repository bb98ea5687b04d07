"""Tests for console and file logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mini_greeter.l4_frameworks_and_drivers.logging_setup import (
    LOG_FILE_NAME,
    LOGGER_NAME,
    setup_console_logging,
    setup_file_logging,
)


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved_level)


def _named(name: str) -> list[logging.Handler]:
    return [h for h in logging.getLogger(LOGGER_NAME).handlers if h.get_name() == name]


class TestConsoleLogging:
    def test_info_by_default(self):
        setup_console_logging()
        (handler,) = _named('mini_greeter.console')
        assert handler.level == logging.INFO

    def test_verbose_enables_debug(self):
        setup_console_logging(verbose=True)
        (handler,) = _named('mini_greeter.console')
        assert handler.level == logging.DEBUG

    def test_repeated_setup_keeps_one_handler(self):
        setup_console_logging()
        setup_console_logging()
        assert len(_named('mini_greeter.console')) == 1


class TestFileLogging:
    def test_creates_log_file(self, tmp_path: Path):
        log_dir = tmp_path / 'logs'
        log_path = setup_file_logging(log_dir)
        assert log_path == log_dir / LOG_FILE_NAME
        assert log_path.exists()

    def test_writes_child_logger_records(self, tmp_path: Path):
        log_path = setup_file_logging(tmp_path)
        logging.getLogger(f'{LOGGER_NAME}.config').debug('hello from the loader')
        for handler in _named('mini_greeter.file'):
            handler.flush()
        assert 'hello from the loader' in log_path.read_text(encoding='utf-8')
