"""Base class for log record enrichers.

Enrichers are ``logging.Filter`` objects that never drop a record: they add
properties to it and let it through. Attach them to a handler (every record
reaching that handler is enriched), to a logger (records logged directly on
that logger), or process-wide on the root handlers with
``configure_logging(enrichers=...)``.

Properties follow add-if-absent semantics: a value already present on the
record, for example passed through ``extra=``, always wins.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import require_text


def add_property_if_absent(record: logging.LogRecord, name: str, value: Any) -> bool:
    """Set ``record.<name>`` unless the record already carries it.

    Returns True when the property was added.
    """
    if value is None or hasattr(record, name):
        return False
    setattr(record, name, value)
    return True


class LogEnricher(logging.Filter):
    """Filter that enriches records instead of filtering them."""

    def __init__(self) -> None:
        super().__init__()

    def enrich(self, record: logging.LogRecord) -> None:
        raise NotImplementedError

    def filter(self, record: logging.LogRecord) -> bool:
        self.enrich(record)
        return True

    @staticmethod
    def _property_name(value: str, argument: str) -> str:
        return require_text(value, argument)


__all__ = ["LogEnricher", "add_property_if_absent"]
