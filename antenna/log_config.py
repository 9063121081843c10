"""structlog configuration for the command-line drivers.

Two output modes:
- Human (default): console renderer to stderr
- JSON (--log-json): one JSON object per line to stderr

Library modules keep using ``logging.getLogger(__name__)``; their records
are routed through the same structlog formatter.
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence, Tuple

import structlog

# Top-level packages whose loggers follow the verbosity flag.
ENGINE_LOGGERS: Tuple[str, ...] = ("antenna", "search", "analysis", "maps")


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    loggers: Sequence[str] = ENGINE_LOGGERS,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG output for ``loggers``. When False,
            only WARNING and above.
        log_json: Use the JSON renderer instead of the console renderer.
        loggers: Logger names that get the verbose level; drivers add
            their own module name.
    """
    engine_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    for name in loggers:
        logging.getLogger(name).setLevel(engine_level)
