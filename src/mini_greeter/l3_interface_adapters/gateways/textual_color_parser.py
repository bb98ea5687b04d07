"""Gateway: textual color parser — implements ColorParser port."""

from __future__ import annotations

import re

from textual.color import Color, ColorParseError

from mini_greeter.l1_entities.color import RGBA
from mini_greeter.l1_entities.errors import InvalidColorError
from mini_greeter.l3_interface_adapters.gateways.x11_colors import X11_COLORS

# 3 or 4 hex digits per channel; shorter forms are left to textual
_LONG_HEX_RE = re.compile(r'#(?:[0-9a-fA-F]{9}|[0-9a-fA-F]{12})')


def _scale_channel(digits: str) -> float:
    """Widen a hex channel to 16 bits by bit replication, as X11 does."""
    bits = len(digits) * 4
    value = int(digits, 16) << (16 - bits)
    while bits < 16:
        value |= value >> bits
        bits *= 2
    return value / 0xFFFF


class TextualColorParser:
    """Parses X11 color names, hex, rgb()/rgba(), hsl()/hsla() and named CSS colors.

    X11 names win over CSS names where they differ (``gray`` is 190,190,190),
    and are matched ignoring case and spaces (``Navy Blue`` == ``navyblue``).
    """

    def parse(self, text: str) -> RGBA:
        candidate = text.strip()
        if _LONG_HEX_RE.fullmatch(candidate):
            width = (len(candidate) - 1) // 3
            red, green, blue = (_scale_channel(candidate[1 + i * width : 1 + (i + 1) * width]) for i in range(3))
            return RGBA(red=red, green=green, blue=blue)

        named = X11_COLORS.get(candidate.replace(' ', '').lower())
        if named is not None:
            return RGBA(red=named[0] / 255, green=named[1] / 255, blue=named[2] / 255)

        try:
            color = Color.parse(candidate)
        except ColorParseError:
            # CSS names are looked up lower-case
            try:
                color = Color.parse(candidate.lower())
            except ColorParseError as e:
                raise InvalidColorError(text) from e
        return RGBA(
            red=color.r / 255,
            green=color.g / 255,
            blue=color.b / 255,
            alpha=min(max(color.a, 0.0), 1.0),
        )
