"""L1 entity: hotkey modifier selection."""

from __future__ import annotations

import enum


class ModifierMask(enum.IntFlag):
    """Modifier bits as laid out in GDK's ``GdkModifierType``."""

    CONTROL = 1 << 2
    ALT = 1 << 3  # MOD1
    SUPER = 1 << 26


class ModKey(enum.Enum):
    CONTROL = 'control'
    ALT = 'alt'
    META = 'meta'

    @property
    def mask(self) -> ModifierMask:
        return _MOD_KEY_MASKS[self]


_MOD_KEY_MASKS = {
    ModKey.CONTROL: ModifierMask.CONTROL,
    ModKey.ALT: ModifierMask.ALT,
    ModKey.META: ModifierMask.SUPER,
}
