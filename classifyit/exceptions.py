"""Custom exception hierarchy for ClassifyIt."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import BatchResult


class ClassifyItError(Exception):
    """Base exception for all ClassifyIt errors."""


class ValidationError(ClassifyItError):
    """Raised when input validation fails."""


class InvalidDimensionError(ValidationError):
    """Raised for a non-positive banner height or a degenerate source image."""


class DecodeError(ClassifyItError):
    """Raised when an input file cannot be decoded as an image."""


class UnsupportedFormatError(DecodeError):
    """Raised when the decoded image format is not supported."""


class FontLoadError(ClassifyItError):
    """Raised when a font file is missing or cannot be parsed."""


class EncodeError(ClassifyItError):
    """Raised when writing the classified image fails."""


class OutputDirectoryError(ClassifyItError):
    """Raised when the output directory cannot be created or written to."""


class BatchError(ClassifyItError):
    """Raised when one or more images of a directory failed to process."""

    def __init__(self, message: str, result: BatchResult) -> None:
        super().__init__(message)
        self.result = result
