"""Classification presets and resolution into a concrete BannerSpec."""

from __future__ import annotations

import logging

from .config import Config
from .enums import Placement
from .exceptions import ValidationError
from .models import RGB, BannerSpec
from .validators import parse_rgb

logger = logging.getLogger("classifyit.presets")

CUSTOM = "custom"

# name -> (background color, text color, label text)
PRESETS: dict[str, tuple[RGB, RGB, str]] = {
    "cui": ((0, 255, 0), (0, 0, 0), "CUI"),
    "secret": ((255, 0, 0), (255, 255, 255), "SECRET"),
    "unclassed": ((0, 0, 0), (255, 255, 255), "UNCLASSIFIED"),
}

CLASSIFICATIONS = (*PRESETS.keys(), CUSTOM)


def resolve_banner_spec(
    classification: str,
    banner_height: int,
    placement: str | Placement | None = None,
    text: str | None = None,
    background_color: str | RGB | None = None,
    text_color: str | RGB | None = None,
) -> BannerSpec:
    """Turn a preset name or custom values into one BannerSpec.

    Args:
        classification: A preset name or ``"custom"``.
        banner_height: Height of each banner in pixels.
        placement: Label placement; unknown values mean center.
        text: Label text, required for ``"custom"``.
        background_color: ``"R,G,B"`` string or tuple for ``"custom"``.
        text_color: ``"R,G,B"`` string or tuple for ``"custom"``.

    Returns:
        The resolved BannerSpec.

    Raises:
        ValidationError: For an unknown classification or bad custom values.
    """
    key = (classification or "").strip().lower()
    resolved_placement = Placement.from_value(placement)

    if key == CUSTOM:
        if not text:
            raise ValidationError("You must provide --text for custom banner mode")
        bg = _coerce_color(background_color, Config.DEFAULT_CUSTOM_BACKGROUND)
        fg = _coerce_color(text_color, Config.DEFAULT_CUSTOM_TEXT_COLOR)
        logger.debug("Resolved custom banner: bg=%s text=%s label=%r", bg, fg, text)
        return BannerSpec(
            background_color=bg,
            text_color=fg,
            label_text=text,
            banner_height=banner_height,
            placement=resolved_placement,
        )

    if key not in PRESETS:
        raise ValidationError(
            f"Invalid classification mode '{classification}'. "
            f"Options: {', '.join(CLASSIFICATIONS)}"
        )

    bg, fg, label = PRESETS[key]
    return BannerSpec(
        background_color=bg,
        text_color=fg,
        label_text=label,
        banner_height=banner_height,
        placement=resolved_placement,
    )


def _coerce_color(value: str | RGB | None, default: str) -> RGB:
    if value is None or value == "":
        return parse_rgb(default)
    if isinstance(value, str):
        return parse_rgb(value)
    return tuple(value)  # type: ignore[return-value]
