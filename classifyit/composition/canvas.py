"""Canvas builder that adds banner space around a source image."""

from __future__ import annotations

import logging

from PIL import Image

from ..constants import OPAQUE
from ..models import BannerSpec, SourceBitmap
from ..validators import validate_banner_height, validate_source_dimensions

logger = logging.getLogger("classifyit.composition.canvas")


class CanvasBuilder:
    """Build the banner canvas for one image.

    The output is an RGBA image as wide as the source and taller by two
    banner heights. Banner rows are overwritten with the opaque background
    color and the source is copied unmodified between them.
    """

    def build_canvas(self, source: SourceBitmap, spec: BannerSpec) -> Image.Image:
        """Create the canvas and composite the source image.

        Args:
            source: Decoded input image.
            spec: Banner parameters.

        Returns:
            New RGBA image of size (W, H + 2 * banner_height).

        Raises:
            InvalidDimensionError: If the banner height or source size is invalid.
        """
        validate_banner_height(spec.banner_height)
        width, height = source.size
        validate_source_dimensions(width, height)

        banner_height = spec.banner_height
        output_height = height + 2 * banner_height
        fill = (*spec.background_color, OPAQUE)

        canvas = Image.new("RGBA", (width, output_height), (0, 0, 0, 0))
        canvas.paste(fill, (0, 0, width, banner_height))
        canvas.paste(fill, (0, output_height - banner_height, width, output_height))

        # No mask: a straight copy keeps the source's own alpha
        src = source.image if source.image.mode == "RGBA" else source.image.convert("RGBA")
        canvas.paste(src, (0, banner_height))

        logger.debug(
            "Built %dx%d canvas for %dx%d source", width, output_height, width, height
        )
        return canvas
