import logging
import os
from datetime import datetime

import pytest
from PIL import Image

from watermark_exif_date.fonts import load_font


def set_mtime(path, when):
    ts = when.timestamp()
    os.utime(path, (ts, ts))


def save_image(path, exif_datetime=None, size=(400, 200), color=(0, 0, 0), fmt=None):
    image = Image.new("RGB", size, color)
    params = {}
    if exif_datetime is not None:
        exif = Image.Exif()
        # Exif sub-IFD pointer -> DateTimeOriginal
        exif[0x8769] = {36867: exif_datetime}
        params["exif"] = exif
    image.save(path, format=fmt, **params)
    return path


@pytest.fixture(autouse=True)
def clear_font_cache():
    load_font.cache_clear()
    yield
    load_font.cache_clear()


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="watermark_exif_date")
    return caplog


@pytest.fixture
def photos(tmp_path):
    """A directory holding one JPEG with EXIF, a text file and a corrupt PNG."""
    directory = tmp_path / "photos"
    directory.mkdir()
    save_image(directory / "holiday.jpg", exif_datetime="2021:03:15 10:00:00", fmt="JPEG")
    (directory / "notes.txt").write_text("not an image", encoding="utf-8")
    (directory / "broken.png").write_bytes(b"\x89PNG\r\n\x1a\n" + b"garbage" * 10)
    return directory


@pytest.fixture
def mtime_2020():
    return datetime(2020, 1, 1, 12, 0, 0)
