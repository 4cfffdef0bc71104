"""Runs the classifier over every chapter referenced by a summary."""

from __future__ import annotations

from pathlib import Path

from .classifier import ContentClassifier
from .logging import get_logger
from .models import AuditResult
from .summary import SummaryParser

logger = get_logger("auditor")


class ContentAuditor:
    """Coordinates summary parsing and chapter classification."""

    def __init__(
        self,
        classifier: ContentClassifier,
        parser: SummaryParser | None = None,
    ) -> None:
        self.classifier = classifier
        self.parser = parser or SummaryParser()

    def run(self, summary_path: Path, content_root: Path) -> AuditResult:
        chapters = self.parser.parse(summary_path)
        if not chapters:
            logger.warning("No chapters referenced in %s", summary_path)
        result = AuditResult(stub_threshold=self.classifier.stub_threshold)
        for rel_path in chapters:
            result.add(self.classifier.classify(content_root, rel_path))
        logger.debug(
            "Classified %d chapters: %d complete, %d stub, %d missing",
            result.total,
            result.complete,
            result.stub,
            result.missing,
        )
        return result


__all__ = ["ContentAuditor"]
