"""structlog configuration for applications embedding attrcoerce.

Library modules log through stdlib ``logging.getLogger(__name__)``;
routing those records through structlog is left to the host application,
which may call :func:`configure_logging` (or :func:`configure_from_settings`)
once at startup.

Two output modes:
- Human (default): console-rendered lines to stderr
- JSON (``log_json``): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from attrcoerce.config.settings import CoerceSettings
from attrcoerce.domain.registry import configure_builtins

PACKAGE_LOGGER = "attrcoerce"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib records for ``attrcoerce`` to stderr.

    Args:
        verbose: DEBUG for the ``attrcoerce`` logger; WARNING+ otherwise.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    shared = _shared_processors()

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

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
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def configure_from_settings(settings: CoerceSettings | None = None) -> CoerceSettings:
    """Apply *settings* (loaded from env when omitted) to logging and built-ins."""
    resolved = settings if settings is not None else CoerceSettings.load()
    configure_logging(verbose=resolved.verbose, log_json=resolved.log_json)
    configure_builtins(resolved.coercion)
    return resolved
