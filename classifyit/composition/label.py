"""Label renderer for banner text."""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

from ..constants import OPAQUE
from ..fonts import FontFace
from ..models import RGB


class LabelRenderer:
    """Draw label text onto a canvas at a baseline anchor."""

    def draw_label(
        self,
        canvas: Image.Image,
        text: str,
        position: tuple[int, int],
        color: RGB,
        font: FontFace,
    ) -> None:
        """Draw ``text`` in place with its baseline starting at ``position``.

        Glyphs advance left to right using the font's own metrics. Characters
        the font lacks render as its fallback glyph.
        """
        if not text:
            return

        draw = ImageDraw.Draw(canvas)
        fill = (*color, OPAQUE)
        x, y = position

        if isinstance(font, (ImageFont.FreeTypeFont, ImageFont.TransposedFont)):
            draw.text((x, y), text, fill=fill, font=font, anchor="ls")
        else:
            # Bitmap fonts have no anchor support; treat the ink bottom as baseline
            bottom = font.getbbox(text)[3]
            draw.text((x, y - bottom), text, fill=fill, font=font)
