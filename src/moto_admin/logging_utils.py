"""
Structured logging for the SDK and the console.

Logs go to stderr so they never interleave with rendered tables on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


def configure_logging(log_level: str = "WARNING", json_output: bool = False) -> None:
    """Configure structlog and the stdlib root logger it writes through."""
    processors: list[Processor] = [
        merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        level=getattr(logging, log_level.upper(), logging.WARNING),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)
