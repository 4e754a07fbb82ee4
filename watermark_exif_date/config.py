"""Watermark settings and the optional JSON defaults file.

A config file holds any of::

    {
      "font_size": 48,
      "color": "255,255,255",
      "position": "BOTTOM_RIGHT",
      "font": "/path/to/font.ttf"
    }

Command-line flags override the file, which overrides the built-in defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .placement import Anchor

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 48
DEFAULT_COLOR = "255,255,255"
DEFAULT_POSITION = Anchor.BOTTOM_RIGHT


@dataclass(frozen=True)
class WatermarkOptions:
    font_size: int = DEFAULT_FONT_SIZE
    color: str = DEFAULT_COLOR
    position: Anchor = DEFAULT_POSITION
    font_path: Optional[Path] = None

    def merged(self, overrides: Dict[str, Any]) -> "WatermarkOptions":
        """Copy with every non-``None`` value of ``overrides`` applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _font_size(value: Any) -> int:
    size = int(value)
    if size < 1:
        raise ValueError(f"font size must be at least 1, not {size}")
    return size


def _color(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(channel) for channel in value)
    return str(value)


def _position(value: Any) -> Anchor:
    return Anchor(str(value).upper())


def _font_path(value: Any) -> Optional[Path]:
    return Path(value) if value else None


# config key -> (option name, converter)
_CONVERTERS = {
    "font_size": ("font_size", _font_size),
    "color": ("color", _color),
    "position": ("position", _position),
    "font": ("font_path", _font_path),
}


def _coerce(config: Dict[str, Any], path: Path) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, (option, convert) in _CONVERTERS.items():
        if key not in config:
            continue
        try:
            values[option] = convert(config[key])
        except (ValueError, TypeError) as exc:
            logger.warning("Ignoring %r in config file %s: %s", key, path, exc)
    return values


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Read overrides from the JSON file at ``path``.

    An unreadable or malformed file is reported and contributes nothing;
    a bad value only drops its own key.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError("top level must be a JSON object")
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load config file %s: %s", path, exc)
        return {}
    return _coerce(config, path)


def resolve_options(
    config_path: Optional[Union[str, Path]] = None,
    **cli_values: Any,
) -> WatermarkOptions:
    options = WatermarkOptions()
    if config_path is not None:
        options = options.merged(load_config(config_path))
    return options.merged(cli_values)
