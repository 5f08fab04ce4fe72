"""Logging for Roster.

All components log under the ``roster`` logger into one rotating file.
Registry operations log every mutation at INFO and every rejected call
at WARNING, tagged with the error kind returned to the caller.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roster.registry.exceptions import RegistryError
    from roster.registry.models import Student

LOG_FILE = "roster.log"
MAX_BYTES = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: str | Path | None = None,
    level: str | None = None,
    console: bool = False,
) -> logging.Logger:
    """Attach a rotating file handler (and optionally stderr) to the roster logger.

    Args:
        log_dir: Directory for roster.log. Falls back to ROSTER_LOG_DIR, then 'logs'.
        level: Level name. Falls back to ROSTER_LOG_LEVEL, then INFO.
        console: Also log to stderr.

    Returns:
        The root roster logger. Calling again replaces its handlers.
    """
    log_path = Path(log_dir or os.environ.get("ROSTER_LOG_DIR", "logs")) / LOG_FILE
    log_path.parent.mkdir(parents=True, exist_ok=True)

    level = (level or os.environ.get("ROSTER_LOG_LEVEL", "INFO")).upper()

    logger = logging.getLogger("roster")
    logger.setLevel(getattr(logging, level, logging.INFO))
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Roster logging initialized (level=%s, file=%s)", level, log_path)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the ``roster.<name>`` logger for a component."""
    if not name.startswith("roster."):
        name = f"roster.{name}"
    return logging.getLogger(name)


def describe_student(student: Student) -> str:
    """Render a compact one-line summary of a student for log output."""
    return (
        f"id={student.id} course={student.course!r} level={student.level} "
        f"cgpa={student.cgpa} lecturer={student.lecturer_id}"
    )


def log_rejection(logger: logging.Logger, operation: str, error: RegistryError) -> RegistryError:
    """Log a rejected registry call and hand the error back for raising."""
    logger.warning("Rejected %s (%s): %s", operation, error.kind, error.message)
    return error
