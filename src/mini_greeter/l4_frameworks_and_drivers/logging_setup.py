"""Console and file logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = 'mini_greeter'
LOG_FILE_NAME = 'mini_greeter_debug.log'

_CONSOLE_HANDLER = 'mini_greeter.console'
_FILE_HANDLER = 'mini_greeter.file'


def _replace_handler(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    for existing in [h for h in logger.handlers if h.get_name() == name]:
        logger.removeHandler(existing)
        existing.close()
    handler.set_name(name)
    logger.addHandler(handler)


def setup_console_logging(verbose: bool = False) -> None:
    """Send greeter diagnostics to stderr; DEBUG and up when *verbose*, else INFO."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    _replace_handler(root, handler, _CONSOLE_HANDLER)


def setup_file_logging(log_dir: Path) -> Path:
    """Configure file-based debug logging into *log_dir*. Returns the log file path."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    handler.setLevel(logging.DEBUG)
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    _replace_handler(root, handler, _FILE_HANDLER)
    logging.getLogger(f'{LOGGER_NAME}.cli').info('Debug logging started → %s', log_path)
    return log_path
