"""Use case: load the greeter key-file into a GreeterConfig."""

from __future__ import annotations

import logging
from pathlib import Path

from mini_greeter.l1_entities.color import RGBA
from mini_greeter.l1_entities.config import BACKGROUND_IMAGE_UNSET, GreeterConfig
from mini_greeter.l1_entities.errors import (
    EmptyHotkeyError,
    InvalidColorError,
    InvalidModKeyError,
    KeyFileError,
)
from mini_greeter.l1_entities.modifier import ModifierMask, ModKey
from mini_greeter.l2_use_cases.config_schema import (
    CHANGE_ME_USER,
    HOTKEYS_GROUP,
    SETTINGS,
    THEME_GROUP,
    SettingSpec,
    ValueKind,
)
from mini_greeter.l2_use_cases.ports.color_parser import ColorParser
from mini_greeter.l2_use_cases.ports.key_file_source import KeyFileOpener, KeyFileSource
from mini_greeter.l2_use_cases.ports.keycode_resolver import KeycodeResolver

log = logging.getLogger('mini_greeter.config')


class LoadConfigUseCase:
    """Reads every known setting once, substituting defaults for missing or malformed keys.

    Raises ConfigLoadError (file unreadable, empty hotkey, unknown mod-key);
    the caller decides how to terminate.
    """

    def __init__(
        self,
        open_source: KeyFileOpener,
        color_parser: ColorParser,
        keycode_resolver: KeycodeResolver,
    ) -> None:
        self._open_source = open_source
        self._colors = color_parser
        self._keycodes = keycode_resolver

    def load(self, path: Path) -> GreeterConfig:
        source = self._open_source(path)
        values = {spec.field: self._resolve(source, spec) for spec in SETTINGS}

        if values['login_user'] == CHANGE_ME_USER:
            log.info('User configuration value is unchanged.')
        if values['background_image'] == '':
            values['background_image'] = BACKGROUND_IMAGE_UNSET
        values['layout_spacing'] = abs(values['layout_spacing'])

        config = GreeterConfig(**values)
        log.debug('Loaded greeter configuration from %s', path)
        return config

    def parse_color(self, source: KeyFileSource, key_name: str, fallback: str) -> RGBA:
        """Read a ``greeter-theme`` color, falling back to *fallback* when unparseable."""
        color_string = _get_string(source, THEME_GROUP, key_name, fallback)
        if '#' in color_string:
            # Strip quotes users wrap around hex colors
            color_string = color_string.replace('"', '').replace("'", '')
        try:
            return self._colors.parse(color_string)
        except InvalidColorError:
            log.warning("Could not parse the '%s' setting: %s", key_name, color_string)
            return self._colors.parse(fallback)

    def parse_hotkey(self, source: KeyFileSource, key_name: str, fallback: str) -> int:
        """Read a ``greeter-hotkeys`` key and return the key value of its first character."""
        key = _get_string(source, HOTKEYS_GROUP, key_name, fallback)
        if key == '':
            raise EmptyHotkeyError(key_name)
        return self._keycodes.unicode_to_keyval(ord(key[0]))

    def _resolve(self, source: KeyFileSource, spec: SettingSpec) -> object:
        if spec.kind is ValueKind.COLOR:
            return self.parse_color(source, spec.key, str(spec.default))
        if spec.kind is ValueKind.HOTKEY:
            return self.parse_hotkey(source, spec.key, str(spec.default))
        if spec.kind is ValueKind.MOD_KEY:
            return _parse_mod_key(_get_string(source, spec.section, spec.key, str(spec.default)))

        getter = {
            ValueKind.STRING: source.get_string,
            ValueKind.BOOLEAN: source.get_boolean,
            ValueKind.INTEGER: source.get_integer,
        }[spec.kind]
        try:
            return getter(spec.section, spec.key)
        except KeyFileError:
            return spec.default


def _get_string(source: KeyFileSource, section: str, key: str, fallback: str) -> str:
    try:
        return source.get_string(section, key)
    except KeyFileError:
        return fallback


def _parse_mod_key(value: str) -> ModifierMask:
    try:
        return ModKey(value).mask
    except ValueError as e:
        raise InvalidModKeyError(value) from e
