"""Tests for the textual-backed color parser gateway."""

from __future__ import annotations

import pytest

from mini_greeter.l1_entities.color import RGBA
from mini_greeter.l1_entities.errors import InvalidColorError
from mini_greeter.l3_interface_adapters.gateways.textual_color_parser import TextualColorParser


@pytest.fixture
def parser() -> TextualColorParser:
    return TextualColorParser()


class TestTextualColorParser:
    def test_six_digit_hex(self, parser):
        assert parser.parse('#112233') == RGBA(red=0x11 / 255, green=0x22 / 255, blue=0x33 / 255)

    def test_hex_is_case_insensitive(self, parser):
        assert parser.parse('#F92672') == parser.parse('#f92672')

    def test_three_digit_hex(self, parser):
        assert parser.parse('#fff') == RGBA(red=1.0, green=1.0, blue=1.0)

    def test_hex_with_alpha(self, parser):
        color = parser.parse('#00000080')
        assert color.alpha == pytest.approx(0x80 / 255, abs=0.01)

    def test_rgb_function(self, parser):
        assert parser.parse('rgb(255,0,255)') == RGBA(red=1.0, green=0.0, blue=1.0)

    def test_named_color(self, parser):
        assert parser.parse('white') == RGBA(red=1.0, green=1.0, blue=1.0)

    def test_named_color_any_case(self, parser):
        assert parser.parse('White') == parser.parse('white')

    def test_surrounding_whitespace_ignored(self, parser):
        assert parser.parse('  #112233 ') == parser.parse('#112233')

    @pytest.mark.parametrize('text', ['not-a-color', '#12', '"#112233"', ''])
    def test_invalid_raises(self, parser, text):
        with pytest.raises(InvalidColorError) as exc_info:
            parser.parse(text)
        assert exc_info.value.text == text


class TestX11Colors:
    @pytest.mark.parametrize(
        ('text', 'rgb'),
        [
            ('gray50', (127, 127, 127)),
            ('DarkSlateGray4', (82, 139, 139)),
            ('navy blue', (0, 0, 128)),
            ('Navy Blue', (0, 0, 128)),
            ('LightGoldenrod', (238, 221, 130)),
        ],
    )
    def test_names(self, parser, text, rgb):
        assert parser.parse(text) == RGBA(red=rgb[0] / 255, green=rgb[1] / 255, blue=rgb[2] / 255)

    def test_x11_name_wins_over_css(self, parser):
        assert parser.parse('gray') == RGBA(red=190 / 255, green=190 / 255, blue=190 / 255)

    def test_twelve_bit_hex(self, parser):
        assert parser.parse('#fff000fff') == RGBA(red=1.0, green=0.0, blue=1.0)

    def test_sixteen_bit_hex(self, parser):
        assert parser.parse('#ffff00008000') == RGBA(red=1.0, green=0.0, blue=0x8000 / 0xFFFF)

    def test_twelve_bit_hex_replicates_bits(self, parser):
        assert parser.parse('#800000000').red == pytest.approx(0x8008 / 0xFFFF)
