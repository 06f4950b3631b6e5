"""Structured logging setup; log lines go to stderr, the trainer UI to stdout."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(verbose: bool = False, file: TextIO | None = None) -> None:
    """Route structlog output to ``file`` (stderr by default).

    Only warnings and errors are shown unless ``verbose`` is set.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=file if file is not None else sys.stderr),
        cache_logger_on_first_use=False,
    )
