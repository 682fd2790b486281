"""Label layout for ClassifyIt."""

from .engine import LabelLayoutEngine, corner_margin

__all__ = ["LabelLayoutEngine", "corner_margin"]
