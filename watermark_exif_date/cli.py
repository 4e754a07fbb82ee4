"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

from . import __version__
from .batch import run_batch
from .config import DEFAULT_COLOR, DEFAULT_FONT_SIZE, DEFAULT_POSITION, resolve_options
from .placement import Anchor

LOG_FORMAT = "[%(levelname)s] %(message)s"


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, not {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="watermark-exif-date",
        description="Adds a date watermark (YYYY-MM-DD) to images based on EXIF data.",
    )
    parser.add_argument(
        "input_dir",
        type=Path,
        help="The directory containing images to watermark.",
    )
    # Defaults stay None so a config file can fill them in.
    parser.add_argument(
        "-s",
        "--font-size",
        type=positive_int,
        default=None,
        help=f"Font size of the watermark text (default: {DEFAULT_FONT_SIZE}).",
    )
    parser.add_argument(
        "-c",
        "--color",
        type=str,
        default=None,
        help=f"Color of the watermark text in R,G,B format (default: {DEFAULT_COLOR}).",
    )
    parser.add_argument(
        "-p",
        "--position",
        type=str.upper,
        choices=[anchor.value for anchor in Anchor],
        default=None,
        help=f"Position of the watermark (default: {DEFAULT_POSITION.value}).",
    )
    parser.add_argument(
        "--font",
        type=Path,
        default=None,
        help="Optional path to a .ttf/.otf font file. If not provided, a bold sans-serif font is used.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with default values for the options above.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    options = resolve_options(
        args.config,
        font_size=args.font_size,
        color=args.color,
        position=Anchor(args.position) if args.position else None,
        font_path=args.font,
    )
    return run_batch(
        args.input_dir,
        font_size=options.font_size,
        color=options.color,
        anchor=options.position,
        font_path=options.font_path,
    )
