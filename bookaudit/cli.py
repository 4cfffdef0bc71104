"""CLI entrypoints for bookaudit commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Tuple

from .auditor import ContentAuditor
from .classifier import ContentClassifier
from .config import BookAuditConfig, ConfigError, ReportConfig, load_config
from .logging import configure_logging
from .models import AuditResult, ChapterStatus
from .reports import MissingContentReport, ProgressReport
from .stubs import StubWriter
from .summary import SummaryNotFoundError

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_USAGE = 2


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    verbose_default: object = argparse.SUPPRESS if suppress_default else False
    log_file_default: object = argparse.SUPPRESS if suppress_default else None
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=verbose_default,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=log_file_default,
        help="Also write a full debug log to this file.",
    )


def _add_book_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the book repository root (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (defaults to <path>/.bookaudit.yml).",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Summary/index file listing the chapters.",
    )
    parser.add_argument(
        "--content-root",
        type=Path,
        default=None,
        help="Directory chapter links are resolved against.",
    )


def _add_report_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Minimum line count for a chapter to count as complete.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the markdown report.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the classification as JSON instead of the console summary.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookaudit",
        description="Audit mdBook chapters referenced by SUMMARY.md for completeness.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    progress_parser = subparsers.add_parser(
        "progress",
        help="Write the course progress dashboard.",
    )
    _add_verbose_option(progress_parser, suppress_default=True)
    _add_book_options(progress_parser)
    _add_report_options(progress_parser)

    audit_parser = subparsers.add_parser(
        "audit",
        help="Write the missing-content checklist; exits 1 when content is incomplete.",
    )
    _add_verbose_option(audit_parser, suppress_default=True)
    _add_book_options(audit_parser)
    _add_report_options(audit_parser)

    stub_parser = subparsers.add_parser(
        "stub",
        help="Scaffold placeholder chapters.",
        description=(
            "Scaffold placeholder chapters. Positional arguments are chapter paths, "
            "so the book root is given with --path instead."
        ),
    )
    _add_verbose_option(stub_parser, suppress_default=True)
    stub_parser.add_argument(
        "files",
        nargs="*",
        help="Chapter paths relative to the content root.",
    )
    stub_parser.add_argument(
        "--path",
        dest="path",
        default=".",
        help="Path to the book repository root (defaults to current directory).",
    )
    stub_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (defaults to <path>/.bookaudit.yml).",
    )
    stub_parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Summary/index file consulted by --missing.",
    )
    stub_parser.add_argument(
        "--content-root",
        type=Path,
        default=None,
        help="Directory chapter files are created in.",
    )
    stub_parser.add_argument(
        "--missing",
        action="store_true",
        help="Create a stub for every chapter the summary references that does not exist.",
    )
    stub_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite chapters that already exist.",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for bookaudit commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = _load_config(args)
    except ConfigError as exc:
        parser.exit(EXIT_USAGE, f"bookaudit: {exc}\n")

    try:
        if args.command == "progress":
            return _run_progress(args, config)
        if args.command == "audit":
            return _run_audit(args, config)
        if args.command == "stub":
            return _run_stub(parser, args, config)
    except SummaryNotFoundError as exc:
        parser.exit(EXIT_USAGE, f"bookaudit: {exc}\n")
    except FileExistsError as exc:
        parser.exit(EXIT_USAGE, f"bookaudit: {exc} (use --force to overwrite)\n")
    except ValueError as exc:
        parser.exit(EXIT_USAGE, f"bookaudit: {exc}\n")
    parser.exit(EXIT_USAGE, "Unknown command\n")  # pragma: no cover - argparse enforces choices


def _load_config(args: argparse.Namespace) -> BookAuditConfig:
    root = Path(args.path)
    # Relative paths inside a config file are anchored at the file's directory.
    config = load_config(args.config if args.config is not None else root)
    if args.summary is not None:
        config.summary = _from_cwd(args.summary)
    if args.content_root is not None:
        config.content_root = _from_cwd(args.content_root)
    return config


def _from_cwd(path: Path) -> Path:
    return path if path.is_absolute() else Path.cwd() / path


def _classify(
    args: argparse.Namespace, config: BookAuditConfig, report: ReportConfig
) -> Tuple[AuditResult, Path]:
    threshold = args.threshold if args.threshold is not None else report.stub_threshold
    output = _from_cwd(args.output) if args.output is not None else report.output
    auditor = ContentAuditor(ContentClassifier(threshold))
    return auditor.run(config.summary, config.content_root), output


def _run_progress(args: argparse.Namespace, config: BookAuditConfig) -> int:
    result, output = _classify(args, config, config.progress)
    ProgressReport().write(output, result)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
    else:
        print(f"Progress: {result.complete}/{result.total} ({result.percent}%)")
    return EXIT_OK


def _run_audit(args: argparse.Namespace, config: BookAuditConfig) -> int:
    result, output = _classify(args, config, config.audit)
    checklist = MissingContentReport().write(output, result)
    issues = result.issues

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
        return EXIT_ISSUES if issues else EXIT_OK

    for line in _issue_lines(result):
        print(line)
    if issues:
        print("")
        print(f"Found {len(issues)} content issues")
        print(checklist, end="")
        return EXIT_ISSUES
    print("✅ All content files present")
    return EXIT_OK


def _issue_lines(result: AuditResult) -> List[str]:
    lines: List[str] = []
    for entry in result.issues:
        if entry.status is ChapterStatus.MISSING:
            suffix = " (unreadable)" if entry.unreadable else ""
            lines.append(f"❌ Missing: {entry.path}{suffix}")
        elif entry.empty:
            lines.append(f"⚠️  Empty: {entry.path}")
        else:
            lines.append(f"⚠️  Stub: {entry.path} ({entry.line_count} lines)")
    return lines


def _run_stub(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: BookAuditConfig
) -> int:
    if not args.files and not args.missing:
        parser.exit(EXIT_USAGE, "bookaudit stub: give chapter paths or --missing\n")

    writer = StubWriter(config.content_root)
    created = writer.create_many(args.files, force=bool(args.force))
    if args.missing:
        auditor = ContentAuditor(ContentClassifier(config.audit.stub_threshold))
        created.extend(writer.create_missing(auditor.run(config.summary, config.content_root)))

    for path in created:
        print(f"✅ Created stub: {_relativize(path)}")
    if not created:
        print("No stubs needed")
    return EXIT_OK


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
