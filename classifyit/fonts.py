"""Font loading and text measurement."""

from __future__ import annotations

import logging
import math
from pathlib import Path

from PIL import ImageFont

from .config import Config
from .exceptions import FontLoadError

logger = logging.getLogger("classifyit.fonts")

FontFace = ImageFont.FreeTypeFont | ImageFont.ImageFont


def load_font(size: int = Config.DEFAULT_FONT_SIZE, font_path: str | None = None) -> FontFace:
    """Load a font face for drawing banner labels.

    Load once and reuse the face for every image of a batch; parsing a
    TrueType file is the only expensive part of the pipeline.

    Args:
        size: Font size in pixels.
        font_path: Optional TrueType/OpenType file (supports ~ expansion).
            When given it must load; otherwise the system fonts in
            ``Config.FONT_SEARCH_PATHS`` are tried, then Pillow's built-in font.

    Returns:
        A Pillow font object.

    Raises:
        FontLoadError: If ``font_path`` is missing or cannot be parsed.
    """
    if size <= 0:
        raise FontLoadError(f"Font size must be positive, got {size}")

    if font_path:
        expanded_path = Path(font_path).expanduser()
        if not expanded_path.exists():
            raise FontLoadError(f"Font file not found: {expanded_path}")
        try:
            font = ImageFont.truetype(str(expanded_path), size)
        except OSError as e:
            raise FontLoadError(f"Unable to parse font '{expanded_path}': {e}") from e
        logger.debug("Loaded font %s at size %d", expanded_path, size)
        return font

    for candidate in Config.FONT_SEARCH_PATHS:
        if not Path(candidate).exists():
            continue
        try:
            font = ImageFont.truetype(candidate, size)
        except OSError as e:
            logger.warning("Failed to load system font %s: %s", candidate, e)
            continue
        logger.debug("Loaded system font %s at size %d", candidate, size)
        return font

    logger.info("No system TrueType font found, using Pillow's built-in font")
    return ImageFont.load_default(size=size)


def measure_text(font: FontFace, text: str) -> int:
    """Return the rendered advance width of ``text``, rounded half up to whole pixels."""
    if not text:
        return 0
    return int(math.floor(float(font.getlength(text)) + 0.5))
