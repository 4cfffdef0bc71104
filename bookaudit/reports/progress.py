"""Course progress dashboard (PROGRESS.md)."""

from __future__ import annotations

from typing import Any, Dict

from ..models import AuditResult
from .base import MarkdownReport

PROGRESS_BAR_URL = "https://progress-bar.dev/{percent}/?title=Complete&width=400"


class ProgressReport(MarkdownReport):
    """Summarises completion counts with a progress-bar badge."""

    template_name = "progress.md.j2"

    def context(self, result: AuditResult) -> Dict[str, Any]:
        return {
            "result": result,
            "badge_url": PROGRESS_BAR_URL.format(percent=result.percent),
        }


__all__ = ["PROGRESS_BAR_URL", "ProgressReport"]
