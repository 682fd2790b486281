"""Banner compositor that classifies a single image."""

from __future__ import annotations

import logging

from PIL import Image

from .composition import CanvasBuilder, LabelRenderer
from .fonts import FontFace, measure_text
from .layout import LabelLayoutEngine
from .models import BannerSpec, SourceBitmap, TextPlacement

logger = logging.getLogger("classifyit.compositor")


class BannerCompositor:
    """Orchestrate canvas building, label layout and label rendering.

    One compositor holds a font face and can annotate any number of images.
    It keeps no per-image state: every call allocates its own canvas.
    """

    def __init__(self, font: FontFace) -> None:
        self.font = font
        self.canvas_builder = CanvasBuilder()
        self.layout_engine = LabelLayoutEngine()
        self.renderer = LabelRenderer()

    def layout(self, source: SourceBitmap, spec: BannerSpec) -> list[TextPlacement]:
        """Return the label placements ``annotate`` would draw for ``source``."""
        output_height = source.height + 2 * spec.banner_height
        text_width = measure_text(self.font, spec.label_text)
        return self.layout_engine.compute_label_positions(
            spec.label_text,
            source.width,
            spec.banner_height,
            output_height,
            spec.placement,
            text_width,
        )

    def annotate(self, source: SourceBitmap, spec: BannerSpec) -> Image.Image:
        """Add classification banners to ``source``.

        Args:
            source: Decoded input image.
            spec: Banner parameters.

        Returns:
            New RGBA image with both banners and their labels.

        Raises:
            InvalidDimensionError: If the banner height or source size is invalid.
        """
        canvas = self.canvas_builder.build_canvas(source, spec)
        placements = self.layout(source, spec)

        for placement in placements:
            self.renderer.draw_label(
                canvas, spec.label_text, placement.position, spec.text_color, self.font
            )

        logger.debug(
            "Annotated %s with %d '%s' labels (%s)",
            source.path.name if source.path else "image",
            len(placements),
            spec.label_text,
            spec.placement.value,
        )
        return canvas
