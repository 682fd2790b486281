"""Shared constants for ClassifyIt."""

from __future__ import annotations

from .enums import ImageFormat

# Pillow format names mapped to the formats we read and write
SUPPORTED_FORMATS = {
    "PNG": ImageFormat.PNG,
    "JPEG": ImageFormat.JPEG,
    # Multi-picture JPEG from cameras and phones; the first frame is used
    "MPO": ImageFormat.JPEG,
}

# Baseline nudge below the banner's vertical midpoint, in pixels
BASELINE_OFFSET = 10

# Horizontal margin for corner labels as a fraction of image width
CORNER_MARGIN_RATIO = 0.05

# Banners and labels are always fully opaque
OPAQUE = 255
