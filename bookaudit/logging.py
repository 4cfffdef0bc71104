"""Logging setup shared by the bookaudit commands."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "bookaudit"
CONSOLE_FORMAT = "[bookaudit] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``bookaudit`` or one of its children (``bookaudit.<name>``)."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach a console handler and, when ``log_file`` is given, a debug file sink.

    The console shows INFO (DEBUG with ``verbose``). The file always records
    DEBUG so a CI run can keep the full classification trail without flooding
    the job output.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.propagate = False
    _close_handlers(logger)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)
    logger.setLevel(console_level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["configure_logging", "get_logger"]
