"""Global configuration for ClassifyIt."""

from __future__ import annotations


class Config:
    """Global configuration."""

    # Banner
    DEFAULT_BANNER_HEIGHT = 60
    DEFAULT_PLACEMENT = "center"

    # Output
    DEFAULT_OUTPUT_DIR = "classifyit_output"
    WRITE_TEST_FILENAME = "test_write.tmp"

    # Custom classification
    DEFAULT_CUSTOM_BACKGROUND = "255,0,0"
    DEFAULT_CUSTOM_TEXT_COLOR = "255,255,255"

    # Fonts
    DEFAULT_FONT_SIZE = 36
    FONT_SEARCH_PATHS = (
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
        "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
        "/Library/Fonts/Arial Bold.ttf",
        "C:\\Windows\\Fonts\\arialbd.ttf",
    )

    # Logging
    LOG_LEVEL_ENV = "CLASSIFYIT_LOG_LEVEL"
