"""Markdown report renderers."""

from .base import MarkdownReport, format_timestamp
from .missing import MissingContentReport
from .progress import PROGRESS_BAR_URL, ProgressReport

__all__ = [
    "MarkdownReport",
    "MissingContentReport",
    "PROGRESS_BAR_URL",
    "ProgressReport",
    "format_timestamp",
]
