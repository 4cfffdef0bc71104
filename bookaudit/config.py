"""Configuration loading for bookaudit (.bookaudit.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".bookaudit.yml"

DEFAULT_SUMMARY = "book/src/SUMMARY.md"
DEFAULT_CONTENT_ROOT = "book/src"
DEFAULT_PROGRESS_OUTPUT = "PROGRESS.md"
DEFAULT_AUDIT_OUTPUT = ".github/MISSING_CONTENT.md"
DEFAULT_PROGRESS_THRESHOLD = 20
DEFAULT_AUDIT_THRESHOLD = 10


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReportConfig:
    """Output location and stub threshold for one report."""

    output: Path
    stub_threshold: int


@dataclass
class BookAuditConfig:
    """Represents the settings defined in .bookaudit.yml."""

    root: Path
    summary: Path = field(default=Path(DEFAULT_SUMMARY))
    content_root: Path = field(default=Path(DEFAULT_CONTENT_ROOT))
    progress: ReportConfig = field(
        default_factory=lambda: ReportConfig(
            output=Path(DEFAULT_PROGRESS_OUTPUT),
            stub_threshold=DEFAULT_PROGRESS_THRESHOLD,
        )
    )
    audit: ReportConfig = field(
        default_factory=lambda: ReportConfig(
            output=Path(DEFAULT_AUDIT_OUTPUT),
            stub_threshold=DEFAULT_AUDIT_THRESHOLD,
        )
    )

    def __post_init__(self) -> None:
        self.summary = self._anchor(self.summary)
        self.content_root = self._anchor(self.content_root)
        self.progress.output = self._anchor(self.progress.output)
        self.audit.output = self._anchor(self.audit.output)

    def _anchor(self, path: Path) -> Path:
        return path if path.is_absolute() else self.root / path


def load_config(config_path: Path) -> BookAuditConfig:
    """Load configuration from disk.

    ``config_path`` may be the book root or the config file itself. A missing
    file yields the defaults, anchored at the book root.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BookAuditConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    summary = _as_str(data.get("summary")) or DEFAULT_SUMMARY
    content_root = _as_str(data.get("content_root")) or DEFAULT_CONTENT_ROOT

    progress = _report_config(
        data.get("progress"),
        "progress",
        default_output=DEFAULT_PROGRESS_OUTPUT,
        default_threshold=DEFAULT_PROGRESS_THRESHOLD,
    )
    audit = _report_config(
        data.get("audit"),
        "audit",
        default_output=DEFAULT_AUDIT_OUTPUT,
        default_threshold=DEFAULT_AUDIT_THRESHOLD,
    )

    return BookAuditConfig(
        root=root,
        summary=Path(summary),
        content_root=Path(content_root),
        progress=progress,
        audit=audit,
    )


def _report_config(
    value: Any, key: str, *, default_output: str, default_threshold: int
) -> ReportConfig:
    section = _as_dict(value)
    output = _as_str(section.get("output")) or default_output
    threshold = _as_int(section.get("stub_threshold"))
    if threshold is None:
        threshold = default_threshold
    if threshold < 0:
        raise ConfigError(f"{key}.stub_threshold must not be negative")
    return ReportConfig(output=Path(output), stub_threshold=threshold)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
