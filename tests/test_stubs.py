"""Tests for bookaudit.stubs."""

from __future__ import annotations

import pytest

from bookaudit.auditor import ContentAuditor
from bookaudit.classifier import ContentClassifier
from bookaudit.stubs import StubWriter, title_from_path
from tests._fixtures.book_builder import BookBuilder


@pytest.mark.parametrize(
    ("rel_path", "title"),
    [
        ("swift/error-handling.md", "Error Handling"),
        ("apple-framework/2025-updates.md", "2025 Updates"),
        ("introduction.md", "Introduction"),
        ("swiftui/state-and-binding.md", "State And Binding"),
    ],
)
def test_title_from_path(rel_path: str, title: str) -> None:
    assert title_from_path(rel_path) == title


def test_create_writes_template(book: BookBuilder) -> None:
    path = StubWriter(book.content_root).create("swift/error-handling.md")

    assert path == book.content_root / "swift" / "error-handling.md"
    text = path.read_text(encoding="utf-8")
    assert text.startswith("# Error Handling\n\n> 🚧 This section is under development\n")
    assert "This chapter covers Error Handling in the context of modern Swift" in text
    assert "```swift\n// Example code coming soon\n```" in text
    assert text.endswith("Continue to the next chapter to learn more.\n")


def test_create_refuses_to_overwrite(book: BookBuilder) -> None:
    book.write("done.md", "# Done\n")
    writer = StubWriter(book.content_root)
    with pytest.raises(FileExistsError):
        writer.create("done.md")
    assert (book.content_root / "done.md").read_text(encoding="utf-8") == "# Done\n"

    writer.create("done.md", force=True)
    assert "under development" in (book.content_root / "done.md").read_text(encoding="utf-8")


def test_create_missing_only_touches_missing_chapters(book: BookBuilder) -> None:
    book.summary(["have.md", "short.md", "new/one.md", "new/one.md", "two.md"])
    book.chapter("have.md", 30)
    book.chapter("short.md", 2)
    result = ContentAuditor(ContentClassifier(10)).run(book.summary_path, book.content_root)

    created = StubWriter(book.content_root).create_missing(result)

    assert created == [book.content_root / "new" / "one.md", book.content_root / "two.md"]
    assert (book.content_root / "short.md").read_text(encoding="utf-8") == "line 0\nline 1\n"


def test_create_many_checks_every_target_before_writing(book: BookBuilder) -> None:
    book.write("b.md", "# B\n")
    writer = StubWriter(book.content_root)

    with pytest.raises(FileExistsError) as excinfo:
        writer.create_many(["a.md", "b.md", "c.md"])

    assert "b.md" in str(excinfo.value)
    assert not (book.content_root / "a.md").exists()
    assert not (book.content_root / "c.md").exists()

    created = writer.create_many(["a.md", "b.md", "a.md"], force=True)
    assert created == [book.content_root / "a.md", book.content_root / "b.md"]
