"""Shared Jinja2 rendering for markdown reports."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, PackageLoader

from ..logging import get_logger
from ..models import AuditResult, ChapterEntry, ChapterStatus

logger = get_logger("reports")


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a timestamp the way ``date`` prints it, e.g. ``Mon Jan  6 09:15:00 UTC 2025``.

    The day of month is space padded, as in the C locale.
    """
    moment = moment or datetime.now().astimezone()
    parts = [moment.strftime("%a %b"), f"{moment.day:2d}", moment.strftime("%H:%M:%S")]
    zone = moment.strftime("%Z")
    if zone:
        parts.append(zone)
    parts.append(str(moment.year))
    return " ".join(parts)


def issue_note(entry: ChapterEntry) -> str:
    """Checklist suffix explaining why a chapter is incomplete."""
    if entry.unreadable:
        return " (unreadable)"
    if entry.status is not ChapterStatus.STUB:
        return ""
    if entry.empty:
        return " (empty)"
    return f" (stub - {entry.line_count} lines)"


def create_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("bookaudit.reports", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["issue_note"] = issue_note
    return env


class MarkdownReport:
    """Renders an audit result through a packaged template."""

    template_name = ""

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env or create_environment()

    def context(self, result: AuditResult) -> Dict[str, Any]:
        return {"result": result}

    def render(self, result: AuditResult, generated_at: datetime | None = None) -> str:
        template = self._env.get_template(self.template_name)
        return template.render(
            generated_at=format_timestamp(generated_at),
            **self.context(result),
        )

    def write(
        self, path: Path, result: AuditResult, generated_at: datetime | None = None
    ) -> str:
        content = self.render(result, generated_at)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", path)
        return content


__all__ = ["MarkdownReport", "create_environment", "format_timestamp", "issue_note"]
