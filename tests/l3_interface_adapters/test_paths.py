"""Tests for shared path constants."""

from __future__ import annotations

from pathlib import Path

from mini_greeter.l3_interface_adapters.gateways.paths import CONFIG_FILE, LOG_DIR


class TestPaths:
    def test_config_file_is_path(self):
        assert isinstance(CONFIG_FILE, Path)

    def test_config_file_location(self):
        assert CONFIG_FILE == Path('/etc/lightdm/lightdm-mini-greeter.conf')

    def test_log_dir_is_path(self):
        assert isinstance(LOG_DIR, Path)

    def test_log_dir_named_after_app(self):
        assert 'mini-greeter' in LOG_DIR.parts
