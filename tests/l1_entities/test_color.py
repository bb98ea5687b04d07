"""Tests for the RGBA color entity."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mini_greeter.l1_entities.color import RGBA


class TestRGBA:
    def test_alpha_defaults_to_opaque(self):
        assert RGBA(red=0.0, green=0.0, blue=0.0).alpha == 1.0

    def test_channel_out_of_range_raises(self):
        with pytest.raises(ValidationError):
            RGBA(red=1.5, green=0.0, blue=0.0)

    def test_negative_alpha_raises(self):
        with pytest.raises(ValidationError):
            RGBA(red=0.0, green=0.0, blue=0.0, alpha=-0.1)

    def test_frozen(self):
        color = RGBA(red=0.0, green=0.0, blue=0.0)
        with pytest.raises(ValidationError):
            color.red = 1.0  # type: ignore[misc]

    def test_equal_by_value(self):
        assert RGBA(red=0.5, green=0.5, blue=0.5) == RGBA(red=0.5, green=0.5, blue=0.5, alpha=1.0)


class TestToCss:
    def test_opaque_renders_rgb(self):
        color = RGBA(red=1.0, green=0x26 / 255, blue=0x72 / 255)
        assert color.to_css() == 'rgb(255,38,114)'

    def test_translucent_renders_rgba(self):
        color = RGBA(red=0.0, green=0.0, blue=1.0, alpha=0.5)
        assert color.to_css() == 'rgba(0,0,255,0.5)'
