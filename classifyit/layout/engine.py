"""Layout engine that places banner labels."""

from __future__ import annotations

import logging
import math

from ..constants import BASELINE_OFFSET, CORNER_MARGIN_RATIO
from ..enums import Alignment, BannerPosition, Placement
from ..models import TextPlacement

logger = logging.getLogger("classifyit.layout")


def corner_margin(image_width: int) -> int:
    """Horizontal margin for corner labels, rounded half up."""
    return int(math.floor(CORNER_MARGIN_RATIO * image_width + 0.5))


class LabelLayoutEngine:
    """Compute baseline anchors for banner labels.

    Coordinates are in output-canvas pixels. ``y`` is the text baseline and
    ``x`` the left edge of the first glyph's advance, so the renderer can
    draw each label without further measurement.

    Supported placements:
    - CENTER: one label centered in each banner (2 placements)
    - CORNERS: left- and right-aligned labels in each banner (4 placements)
    """

    def compute_label_positions(
        self,
        text: str,
        image_width: int,
        banner_height: int,
        output_height: int,
        placement: Placement | str | None,
        text_width: int,
    ) -> list[TextPlacement]:
        """Calculate label anchors for both banners.

        Args:
            text: Label text (only used for logging; width is pre-measured).
            image_width: Width of the output canvas.
            banner_height: Height of each banner.
            output_height: Height of the output canvas.
            placement: Placement mode; unknown values fall back to CENTER.
            text_width: Rendered width of ``text`` in pixels.

        Returns:
            Placements ordered top before bottom, left before right.
        """
        mode = Placement.from_value(placement)

        top_y = banner_height // 2 + BASELINE_OFFSET
        bottom_y = (output_height - banner_height) + banner_height // 2 + BASELINE_OFFSET

        if mode == Placement.CORNERS:
            margin = corner_margin(image_width)
            left_x = margin
            right_x = image_width - margin - text_width
            if text_width + 2 * margin > image_width:
                logger.debug(
                    "Corner labels for %r overlap: width %d, margin %d, image %d",
                    text, text_width, margin, image_width,
                )
            return [
                TextPlacement(left_x, top_y, Alignment.LEFT, BannerPosition.TOP),
                TextPlacement(right_x, top_y, Alignment.RIGHT, BannerPosition.TOP),
                TextPlacement(left_x, bottom_y, Alignment.LEFT, BannerPosition.BOTTOM),
                TextPlacement(right_x, bottom_y, Alignment.RIGHT, BannerPosition.BOTTOM),
            ]

        center_x = image_width // 2 - text_width // 2
        return [
            TextPlacement(center_x, top_y, Alignment.CENTER, BannerPosition.TOP),
            TextPlacement(center_x, bottom_y, Alignment.CENTER, BannerPosition.BOTTOM),
        ]
