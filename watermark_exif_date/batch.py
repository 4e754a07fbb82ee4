"""Watermark every supported image in a directory.

Each file is processed on its own: whatever goes wrong with one image is
logged and recorded in the :class:`BatchReport`, and the batch moves on.
Running the tool again on the output directory stamps the images a second
time; nothing detects an existing watermark.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .applier import apply_watermark
from .colors import Color, parse_color
from .errors import (
    InvalidInputDirectory,
    OutputDirCreationFailure,
    PerFileProcessingFailure,
    WatermarkError,
)
from .placement import Anchor

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".png")
OUTPUT_DIR_SUFFIX = "_watermark"

EXIT_OK = 0
EXIT_FAILURE = 1


class OutcomeStatus(Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    status: OutcomeStatus
    reason: Optional[str] = None
    error: Optional[PerFileProcessingFailure] = None


@dataclass
class BatchReport:
    output_dir: Path
    outcomes: List[FileOutcome] = field(default_factory=list)

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def succeeded(self) -> int:
        return self._count(OutcomeStatus.SUCCESS)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)


def is_supported_name(name: str) -> bool:
    return name.lower().endswith(SUPPORTED_EXTENSIONS)


def output_dir_for(input_dir: Path) -> Path:
    """``photos/`` -> ``photos/photos_watermark/``."""
    input_dir = Path(input_dir).absolute()
    return input_dir / f"{input_dir.name}{OUTPUT_DIR_SUFFIX}"


def prepare_output_dir(input_dir: Path) -> Path:
    if not input_dir.is_dir():
        raise InvalidInputDirectory(input_dir)
    out_dir = output_dir_for(input_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirCreationFailure(out_dir, exc) from exc
    return out_dir


def iter_candidates(input_dir: Path) -> Iterator[Path]:
    """Yield entries of ``input_dir`` with a supported extension, by name.

    Raises:
        OSError: if the directory cannot be listed.
    """
    names = sorted(os.listdir(input_dir))
    for name in names:
        logger.debug("Found in directory: %s", name)
    for name in names:
        if is_supported_name(name):
            yield input_dir / name


def process_directory(
    input_dir: Path,
    output_dir: Path,
    color: Color,
    font_size: int,
    anchor: Anchor,
    font_path: Optional[Path] = None,
) -> BatchReport:
    report = BatchReport(output_dir=output_dir)
    for path in iter_candidates(input_dir):
        if not path.is_file():
            logger.debug("Skipping %s: not a regular file", path.name)
            report.outcomes.append(FileOutcome(path, OutcomeStatus.SKIPPED, "not a regular file"))
            continue
        try:
            apply_watermark(path, output_dir, color, font_size, anchor, font_path)
        except Exception as exc:
            failure = PerFileProcessingFailure(path, exc)
            logger.error("%s", failure)
            report.outcomes.append(FileOutcome(path, OutcomeStatus.FAILED, str(exc), failure))
        else:
            logger.info("Watermarked: %s", path.name)
            report.outcomes.append(FileOutcome(path, OutcomeStatus.SUCCESS))
    return report


def run_batch(
    input_dir: Union[str, Path],
    font_size: int = 48,
    color: str = "255,255,255",
    anchor: Anchor = Anchor.BOTTOM_RIGHT,
    font_path: Optional[Path] = None,
) -> int:
    """Watermark ``input_dir`` and return the process exit status.

    Only an unusable input directory, an uncreatable output directory, an
    unlistable input directory or a malformed color give a non-zero status.
    Individual file failures do not.
    """
    input_dir = Path(input_dir)
    try:
        out_dir = prepare_output_dir(input_dir)
        logger.info("Output directory: %s", out_dir)
        text_color = parse_color(color)
    except WatermarkError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    try:
        report = process_directory(input_dir, out_dir, text_color, font_size, anchor, font_path)
    except OSError as exc:
        logger.error("Could not list %s: %s", input_dir, exc)
        return EXIT_FAILURE

    if not report.outcomes:
        logger.info("No supported image files found in the directory.")
        return EXIT_OK

    logger.info(
        "Done. %d watermarked, %d failed, %d skipped. Output: %s",
        report.succeeded,
        report.failed,
        report.skipped,
        out_dir,
    )
    return EXIT_OK
