"""Core data models shared across bookaudit components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class ChapterStatus(str, Enum):
    """Completeness classification for a chapter referenced by the summary."""

    MISSING = "missing"
    STUB = "stub"
    COMPLETE = "complete"


@dataclass
class ChapterEntry:
    """Classification result for an individual chapter file."""

    path: str
    status: ChapterStatus
    line_count: int = 0
    empty: bool = False
    unreadable: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "status": self.status.value,
            "line_count": self.line_count,
            "empty": self.empty,
            "unreadable": self.unreadable,
        }


@dataclass
class AuditResult:
    """Aggregated classification of every chapter in summary order."""

    stub_threshold: int
    entries: List[ChapterEntry] = field(default_factory=list)
    complete: int = 0
    stub: int = 0
    missing: int = 0

    def add(self, entry: ChapterEntry) -> None:
        self.entries.append(entry)
        if entry.status is ChapterStatus.COMPLETE:
            self.complete += 1
        elif entry.status is ChapterStatus.STUB:
            self.stub += 1
        else:
            self.missing += 1

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def percent(self) -> int:
        """Integer completion percentage; an empty summary counts as 0%."""
        if not self.entries:
            return 0
        return self.complete * 100 // self.total

    @property
    def issues(self) -> List[ChapterEntry]:
        return [entry for entry in self.entries if entry.status is not ChapterStatus.COMPLETE]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stub_threshold": self.stub_threshold,
            "total": self.total,
            "complete": self.complete,
            "stub": self.stub,
            "missing": self.missing,
            "percent": self.percent,
            "entries": [entry.to_dict() for entry in self.entries],
        }
