"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from mini_greeter.l1_entities.color import RGBA
from mini_greeter.l1_entities.errors import InvalidColorError, InvalidValueError, KeyNotFoundError
from mini_greeter.l2_use_cases.load_config_use_case import LoadConfigUseCase

SAMPLE_CONFIG = Path(__file__).resolve().parent.parent / 'data' / 'lightdm-mini-greeter.conf'

_HEX_RE = re.compile(r'#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})')

# --- Protocol-conforming Fakes ---


class FakeKeyFileSource:
    """Dict-backed key-file for L2 use case tests. Values are stored as raw strings."""

    def __init__(self, values: dict[tuple[str, str], str] | None = None) -> None:
        self._values = dict(values or {})
        self.get_calls: list[tuple[str, str]] = []

    def set(self, section: str, key: str, value: str) -> None:
        self._values[(section, key)] = value

    def has_group(self, section: str) -> bool:
        return any(s == section for s, _ in self._values)

    def has_key(self, section: str, key: str) -> bool:
        return (section, key) in self._values

    def get_string(self, section: str, key: str) -> str:
        self.get_calls.append((section, key))
        if (section, key) not in self._values:
            raise KeyNotFoundError(section, key)
        return self._values[(section, key)]

    def get_boolean(self, section: str, key: str) -> bool:
        value = self.get_string(section, key)
        if value not in {'true', 'false'}:
            raise InvalidValueError(value)
        return value == 'true'

    def get_integer(self, section: str, key: str) -> int:
        value = self.get_string(section, key)
        try:
            return int(value)
        except ValueError as e:
            raise InvalidValueError(value) from e


class FakeColorParser:
    """Parses ``#RRGGBB`` only and records every string it was handed."""

    def __init__(self) -> None:
        self.parse_calls: list[str] = []

    def parse(self, text: str) -> RGBA:
        self.parse_calls.append(text)
        match = _HEX_RE.fullmatch(text)
        if match is None:
            raise InvalidColorError(text)
        r, g, b = (int(part, 16) / 255 for part in match.groups())
        return RGBA(red=r, green=g, blue=b)


class FakeKeycodeResolver:
    """Returns code points unchanged so tests can read key values as characters."""

    def __init__(self) -> None:
        self.resolve_calls: list[int] = []

    def unicode_to_keyval(self, codepoint: int) -> int:
        self.resolve_calls.append(codepoint)
        return codepoint


# --- Standard Fixtures ---


@pytest.fixture
def fake_source() -> FakeKeyFileSource:
    return FakeKeyFileSource()


@pytest.fixture
def fake_colors() -> FakeColorParser:
    return FakeColorParser()


@pytest.fixture
def fake_keycodes() -> FakeKeycodeResolver:
    return FakeKeycodeResolver()


@pytest.fixture
def fake_loader(fake_source, fake_colors, fake_keycodes) -> LoadConfigUseCase:
    """Use case whose opener always returns *fake_source*, whatever the path."""
    return LoadConfigUseCase(
        open_source=lambda _path: fake_source,
        color_parser=fake_colors,
        keycode_resolver=fake_keycodes,
    )


@pytest.fixture
def write_config(tmp_path: Path):
    """Write key-file text to a temporary file and return its path."""

    def _write(content: str, name: str = 'lightdm-mini-greeter.conf') -> Path:
        p = tmp_path / name
        p.write_text(content, encoding='utf-8')
        return p

    return _write


@pytest.fixture
def sample_config_path() -> Path:
    return SAMPLE_CONFIG
