"""Image file encoder that preserves the input format."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from ..enums import ImageFormat
from ..exceptions import EncodeError

logger = logging.getLogger("classifyit.codec.encoder")


class ImageEncoder:
    """Write classified images in the format they were read in."""

    def encode(self, image: Image.Image, image_format: ImageFormat, file_path: str | Path) -> Path:
        """Save ``image`` to ``file_path`` as ``image_format``.

        JPEG has no alpha channel, so the image is flattened to RGB first.

        Args:
            image: Classified image.
            image_format: Format detected when the input was decoded.
            file_path: Destination path.

        Returns:
            The path written.

        Raises:
            EncodeError: If the image cannot be written.
        """
        path = Path(file_path)
        try:
            if image_format == ImageFormat.JPEG:
                out = image if image.mode == "RGB" else image.convert("RGB")
                out.save(path, format="JPEG")
            elif image_format == ImageFormat.PNG:
                image.save(path, format="PNG")
            else:
                raise EncodeError(f"Cannot encode unsupported format '{image_format}'")
        except EncodeError:
            raise
        except (OSError, ValueError, KeyError) as e:
            raise EncodeError(f"Failed to encode image '{path}': {e}") from e

        logger.debug("Encoded %s as %s", path, image_format.value)
        return path
