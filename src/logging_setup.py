"""Logging configuration for the to-do app.

The list is redrawn over the whole terminal, so the console handler stays
quiet by default (WARNING) and full DEBUG output goes to an optional file.
"""
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FILE_NAME = "todo.log"
OUR_LOGGERS = ("models", "task_store", "task_view", "theme", "cli", "main", "logging_setup")

logger = logging.getLogger(__name__)


class _ConsoleNoiseFilter(logging.Filter):
    """Keep our own records; third-party records only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        root_name = record.name.split(".", 1)[0]
        if root_name in OUR_LOGGERS:
            return True
        return record.levelno >= logging.ERROR


def parse_level(name: Optional[str], default: int = logging.WARNING) -> Optional[int]:
    """Map a level name ("debug", "INFO", ...) to its number; None for unknown names."""
    if not name or not name.strip():
        return default
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return None


def setup_logging(
    *,
    log_dir: Optional[Union[str, Path]] = None,
    console_level: Union[int, str, None] = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """Configure the root logger: filtered stderr handler, plus a file handler when log_dir is set.

    ``console_level`` may be a level name; an unknown name falls back to INFO
    and is reported through the handlers installed here.

    Call this once, before the first log record is emitted.
    """
    bad_level: Optional[str] = None
    if isinstance(console_level, int):
        level = console_level
    else:
        parsed = parse_level(console_level)
        if parsed is None:
            bad_level = console_level
            parsed = logging.INFO
        level = parsed

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)

    if bad_level is not None:
        logger.warning("Unknown log level %r; using INFO.", bad_level)
