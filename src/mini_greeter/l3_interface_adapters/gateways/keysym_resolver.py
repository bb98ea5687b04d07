"""Gateway: X keysym resolver — implements KeycodeResolver port."""

from __future__ import annotations

UNICODE_KEYSYM_OFFSET = 0x01000000

# Control characters that have a dedicated function keysym.
_CONTROL_KEYSYMS = {
    0x08: 0xFF08,  # BackSpace
    0x09: 0xFF09,  # Tab
    0x0A: 0xFF0A,  # Linefeed
    0x0D: 0xFF0D,  # Return
    0x1B: 0xFF1B,  # Escape
    0x7F: 0xFFFF,  # Delete
}


class KeysymResolver:
    """Maps a Unicode code point to the keysym GDK reports for that character.

    Printable Latin-1 characters share their keysym value with their code point;
    everything else uses the Unicode keysym range (``0x01000000 | codepoint``).
    """

    def unicode_to_keyval(self, codepoint: int) -> int:
        if codepoint < 0 or codepoint > 0x10FFFF:
            raise ValueError(f'Not a Unicode code point: {codepoint:#x}')
        if 0x20 <= codepoint <= 0x7E or 0xA0 <= codepoint <= 0xFF:
            return codepoint
        if codepoint in _CONTROL_KEYSYMS:
            return _CONTROL_KEYSYMS[codepoint]
        return codepoint | UNICODE_KEYSYM_OFFSET
