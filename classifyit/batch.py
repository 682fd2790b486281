"""File and directory pipelines: decode, annotate, encode."""

from __future__ import annotations

import logging
from pathlib import Path

from .codec import ImageDecoder, ImageEncoder
from .compositor import BannerCompositor
from .exceptions import BatchError, ClassifyItError, OutputDirectoryError, ValidationError
from .models import BannerSpec, BatchResult
from .validators import ensure_output_dir_writable, validate_directory_path

logger = logging.getLogger("classifyit.batch")


def process_image(
    image_path: str | Path,
    spec: BannerSpec,
    output_dir: str | Path,
    compositor: BannerCompositor,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> Path:
    """Classify one image and save it under ``output_dir``.

    The output keeps the input's file name and format.

    Args:
        image_path: Input image.
        spec: Banner parameters.
        output_dir: Directory for the classified image; created if missing.
        compositor: Compositor holding the shared font face.
        decoder: Optional decoder override.
        encoder: Optional encoder override.

    Returns:
        Path of the written image.

    Raises:
        OutputDirectoryError: If the output directory is unusable.
        DecodeError: If the input cannot be decoded.
        UnsupportedFormatError: If the input is neither PNG nor JPEG.
        InvalidDimensionError: If the image or banner height is degenerate.
        EncodeError: If the output cannot be written.
    """
    decoder = decoder or ImageDecoder()
    encoder = encoder or ImageEncoder()
    image_path = Path(image_path)
    out_dir = Path(output_dir)

    ensure_output_dir_writable(out_dir)

    source = decoder.decode(image_path)
    classified = compositor.annotate(source, spec)

    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(f"Failed to create output directory '{out_dir}': {e}") from e

    return encoder.encode(classified, source.format, out_dir / image_path.name)


def process_directory(
    dir_path: str | Path,
    spec: BannerSpec,
    output_dir: str | Path,
    compositor: BannerCompositor,
) -> BatchResult:
    """Classify every file directly inside ``dir_path``.

    Subdirectories are skipped, not descended into. A failing file is logged
    and recorded; the remaining files are still processed.

    Args:
        dir_path: Directory of input images.
        spec: Banner parameters.
        output_dir: Directory for classified images.
        compositor: Compositor holding the shared font face.

    Returns:
        BatchResult when every file succeeded.

    Raises:
        ValidationError: If ``dir_path`` is not a readable directory.
        BatchError: If any file failed; the BatchResult is attached.
    """
    validate_directory_path(dir_path)
    directory = Path(dir_path)

    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise ValidationError(f"Failed to read directory '{directory}': {e}") from e

    decoder = ImageDecoder()
    encoder = ImageEncoder()
    result = BatchResult()

    for entry in entries:
        if entry.is_dir():
            continue
        try:
            written = process_image(entry, spec, output_dir, compositor, decoder, encoder)
        except ClassifyItError as e:
            logger.error("Error processing %s: %s", entry, e)
            result.failed[entry] = str(e)
        except Exception as e:
            logger.error("Error processing %s: %s", entry, e, exc_info=True)
            result.failed[entry] = str(e)
        else:
            logger.info("Classified: %s", entry)
            result.succeeded.append(written)

    logger.info(
        "Processed %d files in %s: %d classified, %d failed",
        result.total, directory, len(result.succeeded), len(result.failed),
    )

    if not result.ok:
        raise BatchError("some images failed to process", result)
    return result
