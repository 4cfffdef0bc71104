"""Chapter extraction from an mdBook SUMMARY.md."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List


class SummaryNotFoundError(FileNotFoundError):
    """Raised when the summary/index file does not exist."""


class SummaryParser:
    """Collects chapter paths referenced as ``(./path/to/file.md)`` link targets."""

    _LINK_PATTERN = re.compile(r"\(\./([^)]+\.md)\)")

    def extract(self, markdown: str) -> List[str]:
        """Return referenced chapter paths in document order, duplicates included."""
        return [match.group(1) for match in self._LINK_PATTERN.finditer(markdown)]

    def parse(self, summary_path: Path) -> List[str]:
        if not summary_path.is_file():
            raise SummaryNotFoundError(f"Summary file not found: {summary_path}")
        return self.extract(summary_path.read_text(encoding="utf-8"))


__all__ = ["SummaryNotFoundError", "SummaryParser"]
