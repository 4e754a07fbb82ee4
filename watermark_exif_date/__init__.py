"""Stamp the capture date (YYYY-MM-DD) onto every image in a directory."""

__version__ = "1.0.0"

from .applier import apply_watermark
from .batch import BatchReport, FileOutcome, OutcomeStatus, process_directory, run_batch
from .colors import Color, parse_color
from .dates import resolve_date
from .placement import Anchor, compute_origin

__all__ = [
    "Anchor",
    "BatchReport",
    "Color",
    "FileOutcome",
    "OutcomeStatus",
    "apply_watermark",
    "compute_origin",
    "parse_color",
    "process_directory",
    "resolve_date",
    "run_batch",
]
