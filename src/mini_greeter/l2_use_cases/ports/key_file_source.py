"""Port: key-file document access."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol


class KeyFileSource(Protocol):
    """Read-only view over a parsed key-file (``[group]`` headers, ``key=value`` lines).

    Getters raise ``KeyNotFoundError`` for an absent group or key and
    ``InvalidValueError`` when the value cannot be coerced to the requested type.
    """

    def has_group(self, section: str) -> bool: ...

    def has_key(self, section: str, key: str) -> bool: ...

    def get_string(self, section: str, key: str) -> str: ...

    def get_boolean(self, section: str, key: str) -> bool: ...

    def get_integer(self, section: str, key: str) -> int: ...


# Opens a key-file at a path. Raises ConfigFileError when the file is missing
# or cannot be parsed.
KeyFileOpener = Callable[[Path], KeyFileSource]
