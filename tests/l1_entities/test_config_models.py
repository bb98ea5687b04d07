"""Tests for the GreeterConfig Pydantic model — schema validation only."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from mini_greeter.l1_entities.color import RGBA
from mini_greeter.l1_entities.config import BACKGROUND_IMAGE_UNSET, GreeterConfig
from mini_greeter.l1_entities.modifier import ModifierMask

_BLACK = RGBA(red=0.0, green=0.0, blue=0.0)


def _config(**overrides) -> GreeterConfig:
    values = dict(
        login_user='alice',
        show_password_label=True,
        password_label_text='Password:',
        show_input_cursor=True,
        suspend_key=ord('u'),
        hibernate_key=ord('h'),
        restart_key=ord('r'),
        shutdown_key=ord('s'),
        mod_bit=ModifierMask.SUPER,
        font='Sans',
        font_size='1em',
        text_color=_BLACK,
        error_color=_BLACK,
        background_image=BACKGROUND_IMAGE_UNSET,
        background_color=_BLACK,
        window_color=_BLACK,
        border_color=_BLACK,
        password_color=_BLACK,
        password_background_color=_BLACK,
        border_width='2px',
        layout_spacing=15,
    )
    values.update(overrides)
    return GreeterConfig(**values)  # type: ignore[invalid-argument-type]


class TestGreeterConfig:
    def test_valid(self):
        cfg = _config()
        assert cfg.login_user == 'alice'
        assert cfg.mod_bit is ModifierMask.SUPER

    def test_no_defaults(self):
        """GreeterConfig has no defaults — the loader supplies every field."""
        with pytest.raises(ValidationError):
            GreeterConfig()  # type: ignore[call-arg]

    def test_negative_layout_spacing_raises(self):
        with pytest.raises(ValidationError):
            _config(layout_spacing=-1)

    def test_negative_keyval_raises(self):
        with pytest.raises(ValidationError):
            _config(restart_key=-5)

    def test_unknown_modifier_raises(self):
        with pytest.raises(ValidationError):
            _config(mod_bit='shift')

    def test_frozen(self):
        cfg = _config()
        with pytest.raises(ValidationError):
            cfg.font = 'Mono'  # type: ignore[misc]

    def test_equal_by_value(self):
        assert _config() == _config()


class TestBackgroundImage:
    def test_sentinel_means_no_image(self):
        cfg = _config(background_image=BACKGROUND_IMAGE_UNSET)
        assert cfg.has_background_image is False
        assert cfg.background_image_path is None

    def test_path_is_exposed(self):
        cfg = _config(background_image='/usr/share/backgrounds/x.png')
        assert cfg.has_background_image is True
        assert cfg.background_image_path == Path('/usr/share/backgrounds/x.png')
