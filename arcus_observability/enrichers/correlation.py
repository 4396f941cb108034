"""Correlation enricher.

Correlation comes from one of two places, in order:

1. an explicit ``CorrelationInfo`` passed with the record, e.g.
   ``logger.info("...", extra={"correlation_info": info})``; the carrier
   attribute is removed from the record once read;
2. the ambient accessor (the process default when none is given).

When neither yields a correlation the record is left untouched.
"""

from __future__ import annotations

import logging

from ..correlation import CorrelationInfo, CorrelationInfoAccessor, default_correlation_accessor
from ..config.properties import (
    OPERATION_ID_PROPERTY,
    TRANSACTION_ID_PROPERTY,
    CORRELATION_INFO_ATTRIBUTE,
    OPERATION_PARENT_ID_PROPERTY,
)
from .base import LogEnricher, add_property_if_absent


class CorrelationInfoEnricher(LogEnricher):
    """Add operation, transaction and parent operation ids to records."""

    def __init__(
        self,
        accessor: CorrelationInfoAccessor | None = None,
        *,
        operation_id_property_name: str = OPERATION_ID_PROPERTY,
        transaction_id_property_name: str = TRANSACTION_ID_PROPERTY,
        operation_parent_id_property_name: str = OPERATION_PARENT_ID_PROPERTY,
    ) -> None:
        super().__init__()
        self._accessor = accessor
        self.operation_id_property_name = self._property_name(
            operation_id_property_name, "operation_id_property_name"
        )
        self.transaction_id_property_name = self._property_name(
            transaction_id_property_name, "transaction_id_property_name"
        )
        self.operation_parent_id_property_name = self._property_name(
            operation_parent_id_property_name, "operation_parent_id_property_name"
        )

    @property
    def accessor(self) -> CorrelationInfoAccessor:
        # Resolved lazily so a default accessor created after this enricher is still used.
        return self._accessor if self._accessor is not None else default_correlation_accessor()

    def enrich(self, record: logging.LogRecord) -> None:
        correlation_info = self._resolve(record)
        if correlation_info is None:
            return
        add_property_if_absent(record, self.operation_id_property_name, correlation_info.operation_id)
        add_property_if_absent(record, self.transaction_id_property_name, correlation_info.transaction_id)
        add_property_if_absent(
            record,
            self.operation_parent_id_property_name,
            correlation_info.operation_parent_id,
        )

    def _resolve(self, record: logging.LogRecord) -> CorrelationInfo | None:
        explicit = record.__dict__.pop(CORRELATION_INFO_ATTRIBUTE, None)
        if isinstance(explicit, CorrelationInfo):
            return explicit
        return self.accessor.get_correlation_info()


__all__ = ["CorrelationInfoEnricher"]
