"""Parse watermark text colors given as ``R,G,B``."""

from __future__ import annotations

from typing import NamedTuple

from .errors import InvalidColorFormat


class Color(NamedTuple):
    red: int
    green: int
    blue: int


WHITE = Color(255, 255, 255)


def parse_color(text: str) -> Color:
    """Parse ``"R,G,B"`` into a :class:`Color`.

    Exactly three comma separated integers are required. Channels are not
    range-checked, so ``"300,0,-1"`` parses.

    Raises:
        InvalidColorFormat: on the wrong number of components or a
            component that is not an integer.
    """
    parts = text.split(",")
    if len(parts) != 3:
        raise InvalidColorFormat(text)
    try:
        red, green, blue = (int(part.strip()) for part in parts)
    except ValueError as exc:
        raise InvalidColorFormat(text) from exc
    return Color(red, green, blue)
