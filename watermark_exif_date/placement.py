"""Where the date text goes on the canvas.

All coordinates use the canvas' top-left corner as origin with ``y`` growing
downward. The returned ``y`` is the text *baseline*, not the top of the glyph
box. Nothing here is clamped: text larger than the canvas yields coordinates
outside of it and is simply drawn cut off.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Anchor(str, Enum):
    TOP_LEFT = "TOP_LEFT"
    CENTER = "CENTER"
    BOTTOM_RIGHT = "BOTTOM_RIGHT"

    def __str__(self) -> str:
        return self.value


def margin_for(font_size: int) -> int:
    """Edge padding used by the corner anchors: half the font size."""
    return int(font_size * 0.5)


def _half(value: int) -> int:
    # Truncate toward zero, unlike ``//``.
    return value // 2 if value >= 0 else -(-value // 2)


def compute_origin(
    canvas_width: int,
    canvas_height: int,
    text_width: int,
    text_ascent: int,
    text_descent: int,
    text_height: int,
    font_size: int,
    anchor: Anchor,
) -> Tuple[int, int]:
    anchor = Anchor(anchor)
    margin = margin_for(font_size)

    if anchor is Anchor.TOP_LEFT:
        return (margin, text_ascent)
    if anchor is Anchor.CENTER:
        return (
            _half(canvas_width - text_width),
            _half(canvas_height - text_height) + text_ascent,
        )
    # bottom right
    return (
        canvas_width - text_width - margin,
        canvas_height - text_descent - margin,
    )
