"""Gateway: key-file reader built on configparser — implements KeyFileSource port."""

from __future__ import annotations

import configparser
import re
from pathlib import Path

from mini_greeter.l1_entities.errors import ConfigFileError, InvalidValueError, KeyNotFoundError

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ESCAPES = {
    's': ' ',
    'n': '\n',
    't': '\t',
    'r': '\r',
    '\\': '\\',
}

_TRUE_VALUES = frozenset({'true', '1'})
_FALSE_VALUES = frozenset({'false', '0'})

# A section name no text file can declare, so [DEFAULT] stays an ordinary group
_NO_DEFAULT_SECTION = '\x00'


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=('=',),
        comment_prefixes=('#',),
        inline_comment_prefixes=None,
        strict=False,
        empty_lines_in_values=False,
        interpolation=None,
        default_section=_NO_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment] -- key names are case-sensitive
    return parser


class IniKeyFileSource:
    """Key-file document with GLib ``GKeyFile`` value semantics.

    Only ``#`` starts a comment, ``=`` is the only delimiter, key names are
    case-sensitive and a repeated key keeps its last value. Leading
    whitespace is insignificant, so an indented line never continues the
    previous value. Bytes that are not UTF-8 only spoil the value they sit in.
    """

    def __init__(self, parser: configparser.ConfigParser) -> None:
        self._parser = parser

    @classmethod
    def from_path(cls, path: Path | str) -> IniKeyFileSource:
        path = Path(path)
        if not path.is_file():
            raise ConfigFileError(path, 'file not found')
        try:
            text = path.read_text(encoding='utf-8', errors='surrogateescape')
        except OSError as e:
            raise ConfigFileError(path, str(e)) from e
        try:
            return cls.from_string(text, source=str(path))
        except configparser.Error as e:
            raise ConfigFileError(path, e.message) from e

    @classmethod
    def from_string(cls, text: str, source: str = '<string>') -> IniKeyFileSource:
        """Parse an in-memory document. Raises configparser.Error on malformed input."""
        parser = _new_parser()
        parser.read_string('\n'.join(line.lstrip() for line in text.splitlines()), source=source)
        return cls(parser)

    def has_group(self, section: str) -> bool:
        return self._parser.has_section(section)

    def has_key(self, section: str, key: str) -> bool:
        return self._parser.has_section(section) and self._parser.has_option(section, key)

    def get_string(self, section: str, key: str) -> str:
        return _unescape(self._raw(section, key))

    def get_boolean(self, section: str, key: str) -> bool:
        value = self._raw(section, key).strip()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise InvalidValueError(f'[{section}] {key}: {value!r} is not a boolean')

    def get_integer(self, section: str, key: str) -> int:
        value = self._raw(section, key).strip()
        if not _INTEGER_RE.fullmatch(value):
            raise InvalidValueError(f'[{section}] {key}: {value!r} is not an integer')
        number = int(value)
        if not _INT_MIN <= number <= _INT_MAX:
            raise InvalidValueError(f'[{section}] {key}: {value} is out of range')
        return number

    def _raw(self, section: str, key: str) -> str:
        if not self._parser.has_section(section):
            raise KeyNotFoundError(section)
        if not self._parser.has_option(section, key):
            raise KeyNotFoundError(section, key)
        value = self._parser.get(section, key)
        try:
            value.encode('utf-8')
        except UnicodeEncodeError as e:
            raise InvalidValueError(f'[{section}] {key}: value is not valid UTF-8') from e
        return value


def _unescape(raw: str) -> str:
    out: list[str] = []
    chars = iter(raw)
    for ch in chars:
        if ch != '\\':
            out.append(ch)
            continue
        escaped = next(chars, None)
        if escaped not in _ESCAPES:
            raise InvalidValueError(f'Invalid escape sequence in {raw!r}')
        out.append(_ESCAPES[escaped])
    return ''.join(out)
