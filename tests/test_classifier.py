"""Tests for bookaudit.classifier."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from bookaudit import classifier as classifier_module
from bookaudit.classifier import ContentClassifier, count_lines
from bookaudit.models import ChapterStatus
from tests._fixtures.book_builder import BookBuilder


def test_missing_file_is_missing(book: BookBuilder) -> None:
    entry = ContentClassifier(10).classify(book.content_root, "absent.md")
    assert entry.status is ChapterStatus.MISSING
    assert entry.path == "absent.md"
    assert entry.unreadable is False


def test_directory_with_chapter_name_is_missing(book: BookBuilder) -> None:
    (book.content_root / "folder.md").mkdir()
    entry = ContentClassifier(10).classify(book.content_root, "folder.md")
    assert entry.status is ChapterStatus.MISSING


def test_zero_byte_file_is_empty_stub(book: BookBuilder) -> None:
    (book.content_root / "empty.md").write_bytes(b"")
    entry = ContentClassifier(0).classify(book.content_root, "empty.md")
    assert entry.status is ChapterStatus.STUB
    assert entry.empty is True
    assert entry.line_count == 0


@pytest.mark.parametrize(
    ("lines", "threshold", "expected"),
    [
        (9, 10, ChapterStatus.STUB),
        (10, 10, ChapterStatus.COMPLETE),
        (19, 20, ChapterStatus.STUB),
        (20, 20, ChapterStatus.COMPLETE),
    ],
)
def test_threshold_boundary(
    book: BookBuilder, lines: int, threshold: int, expected: ChapterStatus
) -> None:
    book.chapter("chapter.md", lines)
    entry = ContentClassifier(threshold).classify(book.content_root, "chapter.md")
    assert entry.status is expected
    assert entry.line_count == lines
    assert entry.empty is False


def test_line_count_matches_wc_without_trailing_newline(book: BookBuilder) -> None:
    path = book.content_root / "partial.md"
    path.write_text("one\ntwo\nthree", encoding="utf-8")
    assert count_lines(path) == 2


def test_negative_threshold_rejected() -> None:
    with pytest.raises(ValueError):
        ContentClassifier(-1)


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX permissions")
def test_unreadable_file_reported_missing(book: BookBuilder) -> None:
    path = book.chapter("locked.md", 30)
    path.chmod(0)
    try:
        entry = ContentClassifier(10).classify(book.content_root, "locked.md")
    finally:
        path.chmod(0o644)
    assert entry.status is ChapterStatus.MISSING
    assert entry.unreadable is True


def test_classifies_relative_to_content_root(tmp_path: Path) -> None:
    root = tmp_path / "src"
    (root / "swift").mkdir(parents=True)
    (root / "swift" / "basics.md").write_text("x\n" * 25, encoding="utf-8")
    entry = ContentClassifier(20).classify(root, "swift/basics.md")
    assert entry.status is ChapterStatus.COMPLETE


def test_read_error_reported_missing_with_warning(
    book: BookBuilder, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    book.chapter("locked.md", 30)

    def _deny(path: Path) -> int:
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(classifier_module, "count_lines", _deny)
    monkeypatch.setattr(logging.getLogger("bookaudit"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="bookaudit.classifier"):
        entry = ContentClassifier(10).classify(book.content_root, "locked.md")

    assert entry.status is ChapterStatus.MISSING
    assert entry.unreadable is True
    assert entry.line_count == 0
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "locked.md" in warnings[0].getMessage()
    assert warnings[0].name == "bookaudit.classifier"
