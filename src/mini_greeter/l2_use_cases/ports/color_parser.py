"""Port: color string parsing."""

from __future__ import annotations

from typing import Protocol

from mini_greeter.l1_entities.color import RGBA


class ColorParser(Protocol):
    """Abstract color parser — hex or named color text to RGBA."""

    def parse(self, text: str) -> RGBA:
        """Parse *text*. Raises InvalidColorError when the format is not recognized."""
        ...
