"""Data structures for ClassifyIt."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image as PILImage

from .enums import Alignment, BannerPosition, ImageFormat, Placement
from .validators import validate_banner_height, validate_label_text, validate_rgb

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class BannerSpec:
    """Everything needed to stamp banners onto one image."""
    background_color: RGB
    text_color: RGB
    label_text: str
    banner_height: int
    placement: Placement

    def __post_init__(self) -> None:
        validate_rgb(self.background_color, "background_color")
        validate_rgb(self.text_color, "text_color")
        validate_label_text(self.label_text)
        validate_banner_height(self.banner_height)
        if not isinstance(self.placement, Placement):
            object.__setattr__(self, "placement", Placement.from_value(self.placement))


@dataclass
class SourceBitmap:
    """A decoded input image and the format it was stored in."""
    image: PILImage.Image
    format: ImageFormat
    path: Path | None = None

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


@dataclass(frozen=True)
class TextPlacement:
    """Resolved baseline anchor for one label."""
    x: int
    y: int
    alignment: Alignment
    banner: BannerPosition

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass
class BatchResult:
    """Outcome of classifying every file in a directory."""
    succeeded: list[Path] = field(default_factory=list)
    failed: dict[Path, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)
