"""Domain error types."""

from __future__ import annotations

from pathlib import Path


class ConfigLoadError(Exception):
    """Raised when the greeter configuration cannot be produced. Always fatal to the caller."""


class ConfigFileError(ConfigLoadError):
    """Raised when the configuration file is missing or is not a valid key-file."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f'Could not load configuration file {self.path}: {reason}')


class EmptyHotkeyError(ConfigLoadError):
    """Raised when a hotkey is explicitly configured as an empty string."""

    def __init__(self, key_name: str) -> None:
        self.key_name = key_name
        super().__init__(f"Configuration contains empty key for '{key_name}'")


class InvalidModKeyError(ConfigLoadError):
    """Raised when ``mod-key`` is not one of control, alt or meta."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid mod-key configuration value: '{value}'")


class KeyFileError(Exception):
    """A single key could not be read. The loader substitutes the default."""


class KeyNotFoundError(KeyFileError, LookupError):
    """Raised when a group or key is absent from the key-file."""

    def __init__(self, section: str, key: str | None = None) -> None:
        self.section = section
        self.key = key
        where = f'[{section}]' if key is None else f'[{section}] {key}'
        super().__init__(f'Not found: {where}')


class InvalidValueError(KeyFileError, ValueError):
    """Raised when a value cannot be interpreted as the requested type."""


class InvalidColorError(ValueError):
    """Raised when a color string is not in a recognized format."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f'Unrecognized color: {text!r}')
