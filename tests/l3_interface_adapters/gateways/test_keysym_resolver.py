"""Tests for the Unicode to X keysym resolver."""

from __future__ import annotations

import pytest

from mini_greeter.l3_interface_adapters.gateways.keysym_resolver import UNICODE_KEYSYM_OFFSET, KeysymResolver


@pytest.fixture
def resolver() -> KeysymResolver:
    return KeysymResolver()


class TestKeysymResolver:
    @pytest.mark.parametrize('char', ['u', 'h', 'r', 's', 'U', '1', ' ', '~'])
    def test_printable_ascii_maps_to_itself(self, resolver, char):
        assert resolver.unicode_to_keyval(ord(char)) == ord(char)

    def test_latin1_maps_to_itself(self, resolver):
        assert resolver.unicode_to_keyval(ord('ü')) == 0xFC

    def test_control_characters_map_to_function_keysyms(self, resolver):
        assert resolver.unicode_to_keyval(0x0D) == 0xFF0D  # Return
        assert resolver.unicode_to_keyval(0x1B) == 0xFF1B  # Escape
        assert resolver.unicode_to_keyval(0x7F) == 0xFFFF  # Delete

    def test_other_characters_use_unicode_keysyms(self, resolver):
        assert resolver.unicode_to_keyval(ord('ж')) == UNICODE_KEYSYM_OFFSET | 0x0436
        assert resolver.unicode_to_keyval(0x20AC) == 0x010020AC

    @pytest.mark.parametrize('codepoint', [-1, 0x110000])
    def test_out_of_range_raises(self, resolver, codepoint):
        with pytest.raises(ValueError):
            resolver.unicode_to_keyval(codepoint)
