"""
Structured logging for the bid adapter layer.

Every entry carries the auction id and the exchange being run, bound
through structlog context variables for the duration of one
``auction_context`` block. Output is JSON by default; set
``LOG_FORMAT=console`` for local runs and ``LOG_LEVEL`` for verbosity.
"""

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

SERVICE_NAME = "rtb-adapters"


def add_service_info(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor tagging entries with the service name."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: str = "INFO", format: str = "json") -> None:
    """
    Configure structlog for the adapter layer.

    Args:
        level: Log level, overridden by LOG_LEVEL
        format: 'json' or 'console', overridden by LOG_FORMAT
    """
    level = os.getenv("LOG_LEVEL", level).upper()
    format = os.getenv("LOG_FORMAT", format).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    if format == "console":
        renderer: structlog.typing.Processor = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty()
        )
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            add_service_info,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bidder_logger(bidder_code: str) -> structlog.stdlib.BoundLogger:
    """Logger for one exchange adapter; entries carry ``bidder``."""
    return structlog.get_logger("rtbadapters.bidder").bind(bidder=bidder_code)


def http_logger() -> structlog.stdlib.BoundLogger:
    return structlog.get_logger("rtbadapters.http")


def config_logger() -> structlog.stdlib.BoundLogger:
    return structlog.get_logger("rtbadapters.config")


@contextmanager
def auction_context(auction_id: str, bidder_code: str) -> Iterator[None]:
    """
    Bind ``auction_id`` and ``bidder`` to every entry logged in the block.

    Only the two keys are bound and restored on exit, so nested or
    concurrent contexts for other exchanges are left intact.
    """
    with structlog.contextvars.bound_contextvars(auction_id=auction_id, bidder=bidder_code):
        yield


configure_logging()
