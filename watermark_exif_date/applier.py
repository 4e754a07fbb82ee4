"""Stamp one image with its date and write it out as PNG."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image, ImageDraw

from .colors import Color
from .dates import resolve_date
from .errors import UnreadableImage
from .fonts import FontType, TextMetrics, load_font, measure_text
from .placement import Anchor, compute_origin

logger = logging.getLogger(__name__)

# Modes drawn on as-is; anything else is converted to RGBA first.
DRAWABLE_MODES = ("RGB", "RGBA")


def decode_image(source: Path) -> Image.Image:
    """Decode ``source`` into a detached, drawable copy.

    The file handle is released before returning.

    Raises:
        UnreadableImage: if Pillow cannot identify or decode the data.
    """
    try:
        with Image.open(source) as decoded:
            decoded.load()
            if decoded.mode in DRAWABLE_MODES:
                return decoded.copy()
            return decoded.convert("RGBA")
    except (OSError, SyntaxError) as exc:
        # UnidentifiedImageError is an OSError; truncated data may surface as
        # either type depending on the decoder.
        raise UnreadableImage(source) from exc


def draw_date(
    canvas: Image.Image,
    text: str,
    font: FontType,
    metrics: TextMetrics,
    origin: Tuple[int, int],
    color: Color,
) -> None:
    x, y = origin
    draw = ImageDraw.Draw(canvas)
    draw.fontmode = "L"  # anti-aliased glyphs
    # Pillow positions text by its ascender line; ``origin`` is the baseline.
    draw.text((x, y - metrics.ascent), text, font=font, fill=tuple(color))


def apply_watermark(
    source: Union[str, Path],
    output_dir: Union[str, Path],
    color: Color,
    font_size: int,
    anchor: Anchor,
    font_path: Optional[Path] = None,
) -> Path:
    """Write a date-stamped PNG copy of ``source`` into ``output_dir``.

    The output keeps the source file name, extension included, even though
    the bytes are always PNG.

    Returns:
        The path written.

    Raises:
        UnreadableImage: if ``source`` cannot be decoded.
        OSError: if the result cannot be written.
    """
    source = Path(source)
    target = Path(output_dir) / source.name

    with decode_image(source) as canvas:
        date_text = resolve_date(source)
        font = load_font(font_size, font_path)
        metrics = measure_text(font, date_text)
        origin = compute_origin(
            canvas.width,
            canvas.height,
            metrics.width,
            metrics.ascent,
            metrics.descent,
            metrics.height,
            font_size,
            anchor,
        )
        logger.debug("%s: '%s' at %s (%s)", source.name, date_text, origin, Anchor(anchor))
        draw_date(canvas, date_text, font, metrics, origin, color)
        canvas.save(target, format="PNG")

    return target
