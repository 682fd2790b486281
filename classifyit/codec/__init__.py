"""Image decoding and encoding for ClassifyIt."""

from .decoder import ImageDecoder
from .encoder import ImageEncoder

__all__ = ["ImageDecoder", "ImageEncoder"]
