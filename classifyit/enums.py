"""Enumerations for ClassifyIt."""

from __future__ import annotations

from enum import Enum


class Placement(Enum):
    """Where banner labels are drawn."""
    CENTER = "center"
    CORNERS = "corners"

    @classmethod
    def from_value(cls, value: str | Placement | None) -> Placement:
        """Resolve a placement, falling back to CENTER for unknown values."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.CENTER


class ImageFormat(Enum):
    """Raster formats accepted on input and preserved on output."""
    PNG = "PNG"
    JPEG = "JPEG"


class Alignment(Enum):
    """Horizontal alignment of a placed label."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class BannerPosition(Enum):
    """Which of the two banners a label belongs to."""
    TOP = "top"
    BOTTOM = "bottom"
