"""Port: character to key-code translation."""

from __future__ import annotations

from typing import Protocol


class KeycodeResolver(Protocol):
    def unicode_to_keyval(self, codepoint: int) -> int:
        """Return the platform key value produced by typing *codepoint*."""
        ...
