"""Declarative table of every greeter setting: where it lives and what it defaults to."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from mini_greeter.l1_entities.config import BACKGROUND_IMAGE_UNSET

GREETER_GROUP = 'greeter'
HOTKEYS_GROUP = 'greeter-hotkeys'
THEME_GROUP = 'greeter-theme'

CHANGE_ME_USER = 'CHANGE_ME'


class ValueKind(enum.Enum):
    STRING = 'string'
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    COLOR = 'color'
    HOTKEY = 'hotkey'
    MOD_KEY = 'mod_key'


@dataclass(frozen=True)
class SettingSpec:
    """One key in the file, mapped onto one GreeterConfig field."""

    field: str
    section: str
    key: str
    kind: ValueKind
    default: str | bool | int


SETTINGS: tuple[SettingSpec, ...] = (
    SettingSpec('login_user', GREETER_GROUP, 'user', ValueKind.STRING, CHANGE_ME_USER),
    SettingSpec('show_password_label', GREETER_GROUP, 'show-password-label', ValueKind.BOOLEAN, True),
    SettingSpec('password_label_text', GREETER_GROUP, 'password-label-text', ValueKind.STRING, 'Password:'),
    SettingSpec('show_input_cursor', GREETER_GROUP, 'show-input-cursor', ValueKind.BOOLEAN, True),
    SettingSpec('suspend_key', HOTKEYS_GROUP, 'suspend-key', ValueKind.HOTKEY, 'u'),
    SettingSpec('hibernate_key', HOTKEYS_GROUP, 'hibernate-key', ValueKind.HOTKEY, 'h'),
    SettingSpec('restart_key', HOTKEYS_GROUP, 'restart-key', ValueKind.HOTKEY, 'r'),
    SettingSpec('shutdown_key', HOTKEYS_GROUP, 'shutdown-key', ValueKind.HOTKEY, 's'),
    SettingSpec('mod_bit', HOTKEYS_GROUP, 'mod-key', ValueKind.MOD_KEY, 'meta'),
    SettingSpec('font', THEME_GROUP, 'font', ValueKind.STRING, 'Sans'),
    SettingSpec('font_size', THEME_GROUP, 'font-size', ValueKind.STRING, '1em'),
    SettingSpec('text_color', THEME_GROUP, 'text-color', ValueKind.COLOR, '#080800'),
    SettingSpec('error_color', THEME_GROUP, 'error-color', ValueKind.COLOR, '#F8F8F0'),
    SettingSpec('background_image', THEME_GROUP, 'background-image', ValueKind.STRING, BACKGROUND_IMAGE_UNSET),
    SettingSpec('background_color', THEME_GROUP, 'background-color', ValueKind.COLOR, '#1B1D1E'),
    SettingSpec('window_color', THEME_GROUP, 'window-color', ValueKind.COLOR, '#F92672'),
    SettingSpec('border_color', THEME_GROUP, 'border-color', ValueKind.COLOR, '#080800'),
    SettingSpec('password_color', THEME_GROUP, 'password-color', ValueKind.COLOR, '#F8F8F0'),
    SettingSpec(
        'password_background_color',
        THEME_GROUP,
        'password-background-color',
        ValueKind.COLOR,
        '#1B1D1E',
    ),
    SettingSpec('border_width', THEME_GROUP, 'border-width', ValueKind.STRING, '2px'),
    SettingSpec('layout_spacing', THEME_GROUP, 'layout-space', ValueKind.INTEGER, 15),
)

DEFAULTS: dict[str, str | bool | int] = {s.field: s.default for s in SETTINGS}

_BY_FIELD = {s.field: s for s in SETTINGS}


def setting_for(field: str) -> SettingSpec:
    """Look up the setting backing a GreeterConfig field. Raises KeyError if unknown."""
    return _BY_FIELD[field]
