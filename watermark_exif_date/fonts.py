"""Bold sans-serif font lookup and text measurement."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from PIL import ImageFont

logger = logging.getLogger(__name__)

FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

# Bare file names are looked up in the system font directories by Pillow.
BOLD_SANS_CANDIDATES = (
    "DejaVuSans-Bold.ttf",
    "LiberationSans-Bold.ttf",
    "Arial Bold.ttf",
    "arialbd.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    "C:/Windows/Fonts/arialbd.ttf",
)


@dataclass(frozen=True)
class TextMetrics:
    width: int
    ascent: int
    descent: int
    height: int


@lru_cache(maxsize=16)
def load_font(font_size: int, font_path: Optional[Path] = None) -> FontType:
    """Return a bold sans-serif font at ``font_size`` pixels.

    An explicit ``font_path`` is tried first. Without one, or if it fails to
    load, the first installed candidate from :data:`BOLD_SANS_CANDIDATES` is
    used, then Pillow's bundled default font.
    """
    if font_path is not None:
        try:
            return ImageFont.truetype(str(font_path), font_size)
        except OSError as exc:
            logger.warning("Failed to load font '%s': %s. Falling back to default font.", font_path, exc)

    for candidate in BOLD_SANS_CANDIDATES:
        try:
            return ImageFont.truetype(candidate, font_size)
        except OSError:
            continue

    logger.debug("No bold sans-serif font installed; using Pillow's default font")
    return ImageFont.load_default(size=font_size)


def measure_text(font: FontType, text: str) -> TextMetrics:
    width = int(round(font.getlength(text)))
    getmetrics = getattr(font, "getmetrics", None)
    if getmetrics is not None:
        ascent, descent = getmetrics()
    else:
        # Bitmap fonts have no metrics table; treat the box as all ascent.
        _, top, _, bottom = font.getbbox(text)
        ascent, descent = bottom - top, 0
    return TextMetrics(width=width, ascent=ascent, descent=descent, height=ascent + descent)
