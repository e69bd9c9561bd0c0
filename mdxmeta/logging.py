"""Logger setup for mdxmeta runs.

Run narration (``File: ...``, ``✓ Updates applied``) is printed to stdout by the
runner. Log records go to stderr and, when requested, to a log file, so CI jobs
can keep a full debug trail without cluttering the narration.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .errors import ConfigError

ROOT_LOGGER = "mdxmeta"
CONSOLE_FORMAT = "[mdxmeta] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``mdxmeta.<name>``, or the package root logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install the stderr handler and an optional file handler on the root logger.

    The console follows ``verbose``; the log file always records DEBUG so a
    quiet run still leaves analyzer diagnostics behind. Calling this again
    replaces the handlers of the previous call.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console_level = logging.DEBUG if verbose else logging.INFO
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is None:
        logger.setLevel(console_level)
        return logger

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to open log file {log_file}: {exc}") from exc
    sink.setLevel(logging.DEBUG)
    sink.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(sink)
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
