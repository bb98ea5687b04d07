"""Shared path constants for the greeter configuration and logs."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_log_path

CONFIG_FILE = Path('/etc/lightdm/lightdm-mini-greeter.conf')

LOG_DIR = user_log_path('mini-greeter')
