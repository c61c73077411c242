"""
Logging setup - Exam Grade Report
grade_report/core/logging_utils.py

structlog carries diagnostic events to stderr; the run.log artifact is a
plain stdlib logger with one FileHandler per run.
"""

import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

import structlog

from grade_report.config import Settings

RUN_LOGGER_NAME = "grade_report.run"


class IsoUtcFormatter(logging.Formatter):
    """Formats records as ``[2024-05-01T10:00:00.000Z] message``."""

    def __init__(self):
        super().__init__(fmt="[%(asctime)s] %(message)s")

    def formatTime(self, record, datefmt=None):
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _stderr_logger_factory(*args):
    # Resolve sys.stderr per logger so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(settings: Settings) -> None:
    """Configure structlog according to LOG_LEVEL / LOG_FORMAT."""
    level = logging.getLevelName(settings.LOG_LEVEL)
    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


@contextmanager
def open_run_log(path: Path) -> Iterator[logging.Logger]:
    """
    Truncate ``path`` and yield a logger that appends timestamped lines to it.

    The handler is detached and closed on exit so a later run in the same
    process starts from a clean file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    run_logger = logging.getLogger(RUN_LOGGER_NAME)
    run_logger.setLevel(logging.INFO)
    run_logger.propagate = False

    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(IsoUtcFormatter())
    run_logger.addHandler(handler)
    try:
        yield run_logger
    finally:
        run_logger.removeHandler(handler)
        handler.close()
