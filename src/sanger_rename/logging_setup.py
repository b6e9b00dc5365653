from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

LOGGER_NAME = "sanger_rename"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFERRED_CAPACITY = 10_000


def configure_logging(
    level: str = "WARNING",
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: Any | None = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Without a log file, records go to stderr through a MemoryHandler that
    only flushes on flush_deferred_logs(), so nothing is written over the
    full-screen wizard.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else _level_from_name(level))

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        return logger

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    deferred = logging.handlers.MemoryHandler(
        DEFERRED_CAPACITY,
        flushLevel=logging.CRITICAL + 1,
        target=stream_handler,
        flushOnClose=True,
    )
    logger.addHandler(deferred)
    return logger


def flush_deferred_logs() -> None:
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    raise ValueError(f"Unknown log level: {name}")
