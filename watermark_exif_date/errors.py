"""Exceptions raised while watermarking a directory of images."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class WatermarkError(Exception):
    """Base class for all watermarking errors."""


class InvalidInputDirectory(WatermarkError):
    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"Provided path is not a directory: {path}")
        self.path = Path(path)


class OutputDirCreationFailure(WatermarkError):
    def __init__(self, path: Union[str, Path], cause: Exception) -> None:
        super().__init__(f"Could not create output directory: {path} ({cause})")
        self.path = Path(path)
        self.cause = cause


class InvalidColorFormat(WatermarkError, ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid color format {text!r}. Please use R,G,B (e.g. '255,0,0').")
        self.text = text


class UnreadableImage(WatermarkError):
    def __init__(self, path: Union[str, Path], reason: str = "unreadable image format") -> None:
        super().__init__(f"{reason}: {Path(path).name}")
        self.path = Path(path)
        self.reason = reason


class PerFileProcessingFailure(WatermarkError):
    """Wraps whatever went wrong while one file was being watermarked."""

    def __init__(self, path: Union[str, Path], cause: BaseException) -> None:
        super().__init__(f"Failed to watermark {Path(path).name}: {cause}")
        self.path = Path(path)
        self.cause = cause
