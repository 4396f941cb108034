"""Azure Monitor log exporter applying enrichment-derived context tags."""

from __future__ import annotations

from typing import Any

from azure.monitor.opentelemetry.exporter import AzureMonitorLogExporter

from .tags import build_context_tags
from .options import CorrelationPropertyOptions


class ApplicationInsightsLogExporter(AzureMonitorLogExporter):
    """``AzureMonitorLogExporter`` that sets operation and role tags.

    The stock exporter derives ``ai.operation.*`` from the OpenTelemetry span
    context and ``ai.cloud.role`` from the resource. Records carrying
    correlation or component name properties override those tags so that
    the portal groups telemetry by transaction and component.
    """

    def __init__(self, *, correlation: CorrelationPropertyOptions | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._correlation = correlation or CorrelationPropertyOptions()

    def _log_to_envelope(self, log_data):  # type: ignore[override]
        envelope = super()._log_to_envelope(log_data)
        if envelope is None:
            return envelope
        attributes = log_data.log_record.attributes or {}
        tags = build_context_tags(attributes, self._correlation)
        if tags:
            envelope.tags = {**(envelope.tags or {}), **tags}
        return envelope


__all__ = ["ApplicationInsightsLogExporter"]
