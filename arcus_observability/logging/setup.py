"""Root logging configuration for applications using the enrichers."""

from __future__ import annotations

import logging
import contextlib
from collections.abc import Iterable

from ..enrichers import LogEnricher, LogEnrichment
from ..config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT, PACKAGE_LOGGER_NAME


def configure_logging(
    *,
    level: str | int | None = None,
    enrichers: Iterable[LogEnricher] = (),
) -> logging.Logger:
    """Initialize root logging configuration once per process.

    Existing root handlers are reconfigured instead of duplicated. The given
    enrichers are registered on every root handler that does not carry them
    yet, so console output shows the same properties the sinks receive.
    """
    resolved_level = level if level is not None else APP_LOG_LEVEL
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=resolved_level, format=APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)
    else:
        root_logger.setLevel(resolved_level)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(resolved_level)
                handler.setFormatter(logging.Formatter(APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT))

    enrichers = tuple(enrichers)
    for handler in root_logger.handlers:
        registration = LogEnrichment(handler)
        for enricher in enrichers:
            if enricher not in handler.filters:
                registration.with_enricher(enricher)

    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(resolved_level)
    return root_logger


__all__ = ["configure_logging"]
