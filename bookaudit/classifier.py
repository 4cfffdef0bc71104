"""Content-completeness classification for individual chapter files."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .models import ChapterEntry, ChapterStatus

logger = get_logger("classifier")


def count_lines(path: Path) -> int:
    """Count newline characters, matching ``wc -l``."""
    return path.read_bytes().count(b"\n")


class ContentClassifier:
    """Classifies chapters as missing, stub, or complete.

    A chapter is missing when its file does not exist, a stub when it is
    empty or shorter than ``stub_threshold`` lines, and complete otherwise.
    """

    def __init__(self, stub_threshold: int) -> None:
        if stub_threshold < 0:
            raise ValueError("stub_threshold must not be negative")
        self.stub_threshold = stub_threshold

    def classify(self, content_root: Path, rel_path: str) -> ChapterEntry:
        filepath = content_root / rel_path
        if not filepath.is_file():
            logger.debug("Missing chapter %s", rel_path)
            return ChapterEntry(path=rel_path, status=ChapterStatus.MISSING)

        try:
            size = filepath.stat().st_size
            line_count = count_lines(filepath) if size else 0
        except OSError as exc:
            logger.warning("Cannot read %s: %s", filepath, exc)
            return ChapterEntry(path=rel_path, status=ChapterStatus.MISSING, unreadable=True)

        if size == 0:
            logger.debug("Empty chapter %s", rel_path)
            return ChapterEntry(path=rel_path, status=ChapterStatus.STUB, empty=True)
        if line_count < self.stub_threshold:
            logger.debug("Stub chapter %s (%d lines)", rel_path, line_count)
            return ChapterEntry(path=rel_path, status=ChapterStatus.STUB, line_count=line_count)
        return ChapterEntry(path=rel_path, status=ChapterStatus.COMPLETE, line_count=line_count)


__all__ = ["ContentClassifier", "count_lines"]
