"""Resolve the date stamped on an image.

The capture time stored in EXIF wins when it can be read and parsed. In every
other case the file's modification time is used, so :func:`resolve_date`
always produces a ``YYYY-MM-DD`` string.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from PIL import ExifTags, Image

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

EXIF_IFD_POINTER = ExifTags.IFD.Exif  # 0x8769
EXIF_TAG_DATETIME_ORIGINAL = ExifTags.Base.DateTimeOriginal  # 36867

# Layouts seen in the wild for DateTimeOriginal, most common first.
EXIF_DATETIME_FORMATS = (
    "%Y:%m:%d %H:%M:%S",
    "%Y:%m:%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y.%m.%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d",
    "%Y:%m:%d",
)


class MetadataStatus(Enum):
    FOUND = "found"
    MISSING = "missing"
    FAILED = "failed"


@dataclass(frozen=True)
class MetadataResult:
    status: MetadataStatus
    value: Optional[date] = None
    reason: Optional[str] = None

    @classmethod
    def found(cls, value: date) -> "MetadataResult":
        return cls(MetadataStatus.FOUND, value=value)

    @classmethod
    def missing(cls) -> "MetadataResult":
        return cls(MetadataStatus.MISSING)

    @classmethod
    def failed(cls, reason: str) -> "MetadataResult":
        return cls(MetadataStatus.FAILED, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is MetadataStatus.FOUND


def parse_exif_datetime(raw: Union[str, bytes]) -> datetime:
    """Parse an EXIF timestamp such as ``"2021:03:15 10:00:00"``.

    EXIF stores no zone, so the naive result is read as local time.

    Raises:
        ValueError: if no known layout matches.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("ascii", errors="ignore")
    text = str(raw).strip("\x00").strip()
    for fmt in EXIF_DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"unrecognized EXIF date/time {text!r}")


def read_capture_date(image_path: Union[str, Path]) -> MetadataResult:
    """Read DateTimeOriginal from the EXIF sub-IFD of ``image_path``.

    Never raises; problems are reported through the returned result.
    """
    try:
        with Image.open(image_path) as im:
            exif_ifd = im.getexif().get_ifd(EXIF_IFD_POINTER)
        raw = exif_ifd.get(EXIF_TAG_DATETIME_ORIGINAL)
        if not raw:
            return MetadataResult.missing()
        return MetadataResult.found(parse_exif_datetime(raw).date())
    except Exception as exc:
        return MetadataResult.failed(str(exc) or exc.__class__.__name__)


def modification_date(image_path: Union[str, Path]) -> date:
    """Local calendar date of the file's last modification.

    Like a last-modified lookup on a vanished file, an unreadable ``stat``
    counts as the epoch.
    """
    try:
        mtime = os.stat(image_path).st_mtime
    except OSError as exc:
        logger.warning("Could not stat %s (%s). Using the epoch.", Path(image_path).name, exc)
        mtime = 0
    return datetime.fromtimestamp(mtime).date()


def resolve_date(image_path: Union[str, Path]) -> str:
    name = Path(image_path).name
    result = read_capture_date(image_path)
    if result.ok:
        return result.value.strftime(DATE_FORMAT)

    if result.status is MetadataStatus.MISSING:
        logger.warning("No EXIF capture date for %s. Using file modification date.", name)
    else:
        logger.warning(
            "Could not read EXIF date for %s (%s). Using file modification date.",
            name,
            result.reason,
        )
    return modification_date(image_path).strftime(DATE_FORMAT)
