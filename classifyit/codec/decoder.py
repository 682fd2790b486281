"""Image file decoder (PNG, JPEG) for ClassifyIt."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..constants import SUPPORTED_FORMATS
from ..exceptions import DecodeError, UnsupportedFormatError
from ..models import SourceBitmap

logger = logging.getLogger("classifyit.codec.decoder")


class ImageDecoder:
    """Decode raster files into SourceBitmaps.

    The format is taken from the file content as detected by Pillow, not
    from the extension, so a PNG saved as ``photo.jpg`` is still written
    back as PNG.
    """

    def supports(self, image_format: str | None) -> bool:
        return image_format in SUPPORTED_FORMATS

    def decode(self, file_path: str | Path) -> SourceBitmap:
        """Decode an image file.

        Args:
            file_path: Path to the image file.

        Returns:
            The decoded SourceBitmap with its detected format.

        Raises:
            DecodeError: If the file cannot be opened or decoded.
            UnsupportedFormatError: If the image is neither PNG nor JPEG.
        """
        path = Path(file_path)
        try:
            with Image.open(path) as img:
                detected = img.format
                if not self.supports(detected):
                    raise UnsupportedFormatError(
                        f"Unsupported image format '{detected}' for file: {path}"
                    )
                img.load()
                image = img.copy()
        except UnsupportedFormatError:
            raise
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            EOFError,
            OSError,
            SyntaxError,
            ValueError,
        ) as e:
            raise DecodeError(
                f"Failed to decode image '{path}'. Ensure the file is a valid JPEG or PNG: {e}"
            ) from e

        logger.debug("Decoded %s: %dx%d %s (%s)", path.name, *image.size, image.mode, detected)
        return SourceBitmap(image=image, format=SUPPORTED_FORMATS[detected], path=path)
