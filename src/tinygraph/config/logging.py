"""structlog setup for applications embedding tinygraph.

The library itself only emits records (stdlib loggers under ``tinygraph.*``
and the structlog telemetry logger); nothing is configured until an
application calls :func:`configure_logging`. Both kinds of record end up
on one stderr handler, rendered for a console or as JSON lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from tinygraph.config.settings import TinyGraphSettings

LIBRARY_LOGGER = "tinygraph"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all records to stderr; replaces any handlers already on the root logger.

    Args:
        verbose: Let ``tinygraph.*`` DEBUG records through. Other loggers
            stay at WARNING either way.
        log_json: Render JSON lines instead of console text.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def configure_from_settings(settings: TinyGraphSettings) -> None:
    """Apply the ``[logging]`` section of *settings*."""
    configure_logging(verbose=settings.logging.verbose, log_json=settings.logging.log_json)
