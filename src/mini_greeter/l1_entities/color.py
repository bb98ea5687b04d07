"""L1 entity: RGBA color value."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RGBA(BaseModel):
    """Color with float channels in the 0..1 range, alpha included."""

    model_config = ConfigDict(frozen=True)

    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    def to_css(self) -> str:
        """Render as a CSS ``rgb()``/``rgba()`` value with 0-255 channels."""
        r, g, b = (round(c * 255) for c in (self.red, self.green, self.blue))
        if self.alpha == 1.0:
            return f'rgb({r},{g},{b})'
        return f'rgba({r},{g},{b},{self.alpha:g})'
