"""Enricher adding one fixed custom dimension."""

from __future__ import annotations

import logging
from typing import Any

from ..errors import require_not_none
from .base import LogEnricher, add_property_if_absent


class PropertyEnricher(LogEnricher):
    """Add ``name=value`` to every record."""

    def __init__(self, name: str, value: Any) -> None:
        super().__init__()
        self.property_name = self._property_name(name, "name")
        self.value = require_not_none(value, "value")

    def enrich(self, record: logging.LogRecord) -> None:
        add_property_if_absent(record, self.property_name, self.value)


__all__ = ["PropertyEnricher"]
