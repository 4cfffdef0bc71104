"""Missing-content checklist (.github/MISSING_CONTENT.md)."""

from __future__ import annotations

from typing import Any, Dict

from ..models import AuditResult
from .base import MarkdownReport


class MissingContentReport(MarkdownReport):
    """Lists every chapter that is missing, empty, or a stub."""

    template_name = "missing.md.j2"

    def context(self, result: AuditResult) -> Dict[str, Any]:
        return {"result": result, "issues": result.issues}


__all__ = ["MissingContentReport"]
