"""ClassifyIt: classification banners for PNG and JPEG images."""

__version__ = "1.0.0"

from .compositor import BannerCompositor
from .enums import ImageFormat, Placement
from .models import BannerSpec, SourceBitmap, TextPlacement
from .presets import resolve_banner_spec

__all__ = [
    "__version__",
    "BannerCompositor",
    "BannerSpec",
    "ImageFormat",
    "Placement",
    "SourceBitmap",
    "TextPlacement",
    "resolve_banner_spec",
]
