"""Canvas composition and label rendering for ClassifyIt."""

from .canvas import CanvasBuilder
from .label import LabelRenderer

__all__ = ["CanvasBuilder", "LabelRenderer"]
