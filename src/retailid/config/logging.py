"""structlog configuration for retailid.

Two output modes:
- Human (default): colored console output to stderr
- JSON (--log-json): Structured JSON lines to stderr

Library modules log through stdlib ``logging.getLogger(__name__)``; the
``ProcessorFormatter`` gives those records the same structured shape.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "retailid"


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to structlog events and stdlib records alike.

    retailid only logs plain messages (resolver attempts, service debug), so
    the chain stops at context, level, logger name and timestamp.
    """
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route every log record to a single stderr handler.

    Args:
        verbose: Let the ``retailid`` logger through at DEBUG; otherwise WARNING+.
        log_json: One JSON object per line instead of the console renderer.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
    structlog.contextvars.clear_contextvars()


def bind_log_context(**values: object) -> None:
    """Replace the per-invocation context merged into every log line.

    The root CLI binds the subcommand name so ``--log-json`` lines from
    the resolver say which command produced them.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)
