"""Logging for the ``grouporder`` CLI.

Library modules log through ``logging.getLogger(__name__)``; structlog only
formats. Records land on stderr so sorted output on stdout stays pipeable.

With ``-v`` the ``grouporder`` logger drops to DEBUG, which surfaces kind
generation (``grouporder.domain.kinds``), catalog loads and the span
timings from ``grouporder.telemetry``. ``--log-json`` switches the
renderer to one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "grouporder"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
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


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Safe to call more than once: the root handler is replaced, not stacked.

    Args:
        verbose: DEBUG for ``grouporder.*``; otherwise WARNING.
        log_json: JSON lines instead of the console renderer.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
