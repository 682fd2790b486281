"""Input validation for ClassifyIt."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import Config
from .exceptions import InvalidDimensionError, OutputDirectoryError, ValidationError

logger = logging.getLogger("classifyit.validators")


def validate_banner_height(banner_height: int) -> None:
    """Validate the banner height.

    Args:
        banner_height: Height of each banner in pixels.

    Raises:
        InvalidDimensionError: If the height is not a positive integer.
    """
    if isinstance(banner_height, bool) or not isinstance(banner_height, int):
        raise InvalidDimensionError(
            f"Banner height must be an integer, got {type(banner_height).__name__}"
        )
    if banner_height <= 0:
        raise InvalidDimensionError(f"Banner height must be positive, got {banner_height}")


def validate_source_dimensions(width: int, height: int) -> None:
    """Validate source image dimensions.

    Raises:
        InvalidDimensionError: If either dimension is zero or negative.
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(f"Source image must be non-empty, got {width}x{height}")


def validate_rgb(color: object, name: str = "color") -> None:
    """Validate an RGB triple.

    Raises:
        ValidationError: If the value is not three integers in [0, 255].
    """
    if not isinstance(color, tuple) or len(color) != 3:
        raise ValidationError(f"{name} must be an (R, G, B) tuple, got {color!r}")
    for channel in color:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise ValidationError(f"{name} channels must be integers, got {color!r}")
        if not 0 <= channel <= 255:
            raise ValidationError(
                f"{name} channels must be between 0 and 255, got {color!r}"
            )


def validate_label_text(text: str) -> None:
    if not isinstance(text, str) or not text:
        raise ValidationError("Banner label text must be a non-empty string")


def parse_rgb(value: str) -> tuple[int, int, int]:
    """Parse a comma-separated ``R,G,B`` string.

    Args:
        value: String such as ``"255,255,0"``.

    Returns:
        The (R, G, B) tuple.

    Raises:
        ValidationError: If the string is malformed or a channel is out of range.
    """
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 3:
        raise ValidationError(f'Invalid color format (expected "R,G,B"): {value!r}')
    try:
        color = (int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError as e:
        raise ValidationError(f'Invalid color format (expected "R,G,B"): {value!r}') from e
    if any(c < 0 or c > 255 for c in color):
        raise ValidationError(
            f"Invalid color value {value!r}, each channel must be between 0 and 255"
        )
    return color


def validate_file_path(path: str | Path) -> None:
    """Validate an input file exists.

    Raises:
        ValidationError: If the path does not exist or is a directory.
    """
    p = Path(path)
    if not p.exists():
        raise ValidationError(f"File '{path}' does not exist")
    if p.is_dir():
        raise ValidationError(f"'{path}' is a directory, not a file")


def validate_directory_path(path: str | Path) -> None:
    """Validate an input directory exists.

    Raises:
        ValidationError: If the path does not exist or is not a directory.
    """
    p = Path(path)
    if not p.exists():
        raise ValidationError(f"Directory '{path}' does not exist")
    if not p.is_dir():
        raise ValidationError(f"'{path}' is not a directory")


def ensure_output_dir_writable(output_dir: str | Path) -> None:
    """Check that an existing output directory accepts new files.

    A missing directory is fine; it is created when the first image is saved.

    Raises:
        OutputDirectoryError: If the directory exists but a file cannot be created in it.
    """
    out = Path(output_dir)
    if not out.exists():
        return
    test_file = out / Config.WRITE_TEST_FILENAME
    try:
        with open(test_file, "wb"):
            pass
        os.remove(test_file)
    except OSError as e:
        raise OutputDirectoryError(
            f"Output directory '{output_dir}' is not writable: {e}"
        ) from e
    logger.debug("Output directory %s is writable", out)
