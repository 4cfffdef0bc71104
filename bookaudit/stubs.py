"""Placeholder chapters for entries the summary references but nobody wrote yet."""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath
from typing import Iterable, List

from jinja2 import Environment

from .logging import get_logger
from .models import AuditResult, ChapterStatus
from .reports.base import create_environment

logger = get_logger("stubs")

_WORD_START = re.compile(r"\b(.)")


def title_from_path(rel_path: str) -> str:
    """Derive a chapter title from its file name (``error-handling.md`` -> ``Error Handling``)."""
    name = PurePosixPath(rel_path.replace("\\", "/")).name
    if name.endswith(".md"):
        name = name[: -len(".md")]
    name = name.replace("-", " ")
    return _WORD_START.sub(lambda match: match.group(1).upper(), name)


class StubWriter:
    """Writes the "under development" chapter template into the content root."""

    template_name = "chapter_stub.md.j2"

    def __init__(self, content_root: Path, env: Environment | None = None) -> None:
        self.content_root = content_root
        self._env = env or create_environment()

    def render(self, rel_path: str) -> str:
        template = self._env.get_template(self.template_name)
        return template.render(title=title_from_path(rel_path))

    def create(self, rel_path: str, *, force: bool = False) -> Path:
        target = self.content_root / rel_path
        if target.exists() and not force:
            raise FileExistsError(f"Chapter already exists: {target}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.render(rel_path), encoding="utf-8")
        logger.info("Created stub %s", rel_path)
        return target

    def create_missing(self, result: AuditResult) -> List[Path]:
        """Create a stub for every chapter the audit reported missing."""
        return self.create_many(
            entry.path
            for entry in result.entries
            if entry.status is ChapterStatus.MISSING and not entry.unreadable
        )

    def create_many(self, rel_paths: Iterable[str], *, force: bool = False) -> List[Path]:
        """Create every stub or none: existing chapters are rejected before any write."""
        pending = list(dict.fromkeys(rel_paths))
        if not force:
            existing = [path for path in pending if (self.content_root / path).exists()]
            if existing:
                raise FileExistsError(f"Chapter already exists: {', '.join(existing)}")
        return [self.create(rel_path, force=force) for rel_path in pending]


__all__ = ["StubWriter", "title_from_path"]
