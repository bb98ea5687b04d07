"""Greeter configuration model — the typed result of loading the key-file."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from mini_greeter.l1_entities.color import RGBA
from mini_greeter.l1_entities.modifier import ModifierMask

BACKGROUND_IMAGE_UNSET = '""'


class GreeterConfig(BaseModel):
    """Fully-resolved greeter settings. Every field is always populated."""

    model_config = ConfigDict(frozen=True)

    # [greeter]
    login_user: str
    show_password_label: bool
    password_label_text: str
    show_input_cursor: bool

    # [greeter-hotkeys]
    suspend_key: int = Field(ge=0)
    hibernate_key: int = Field(ge=0)
    restart_key: int = Field(ge=0)
    shutdown_key: int = Field(ge=0)
    mod_bit: ModifierMask

    # [greeter-theme]
    font: str
    font_size: str
    text_color: RGBA
    error_color: RGBA
    background_image: str
    background_color: RGBA
    window_color: RGBA
    border_color: RGBA
    password_color: RGBA
    password_background_color: RGBA
    border_width: str
    layout_spacing: int = Field(ge=0)

    @property
    def has_background_image(self) -> bool:
        return self.background_image not in {BACKGROUND_IMAGE_UNSET, ''}

    @property
    def background_image_path(self) -> Path | None:
        """Path of the background image, or None when the sentinel is set."""
        if not self.has_background_image:
            return None
        return Path(self.background_image)
