"""Logging utilities for the CLI entrypoint."""

from __future__ import annotations

import logging
import sys


DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configure process-wide stderr logging; stdout stays reserved for findings."""

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(level)
    root_logger.addHandler(stream_handler)

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(logging.WARNING, root_logger.level))

    logger = logging.getLogger("header_audit")
    logger.setLevel(level)
    return logger
