"""LoggerProvider setup for Application Insights via OpenTelemetry."""

from __future__ import annotations

import socket
import logging
import uuid as _uuid

from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor

from .options import CorrelationPropertyOptions
from .exporter import ApplicationInsightsLogExporter
from ..config.telemetry import (
    OTEL_LOGS_BATCH_SIZE,
    OTEL_LOGS_EXPORT_INTERVAL_MS,
    APPLICATIONINSIGHTS_DISABLE_OFFLINE_STORAGE,
)

logger = logging.getLogger(__name__)


def build_resource(component_name: str | None) -> Resource:
    """Resource whose ``service.name`` becomes the default cloud role name."""
    attrs: dict[str, str] = {
        "host.name": socket.gethostname(),
        "service.instance.id": _uuid.uuid4().hex[:12],
    }
    if component_name:
        attrs["service.name"] = component_name
    return Resource.create(attrs)


def build_logger_provider(
    *,
    connection_string: str,
    component_name: str | None = None,
    correlation: CorrelationPropertyOptions | None = None,
) -> LoggerProvider:
    """Create a LoggerProvider exporting batches to Application Insights."""
    exporter = ApplicationInsightsLogExporter(
        connection_string=connection_string,
        correlation=correlation,
        disable_offline_storage=APPLICATIONINSIGHTS_DISABLE_OFFLINE_STORAGE,
    )
    processor = BatchLogRecordProcessor(
        exporter,
        max_export_batch_size=OTEL_LOGS_BATCH_SIZE,
        schedule_delay_millis=OTEL_LOGS_EXPORT_INTERVAL_MS,
    )
    provider = LoggerProvider(resource=build_resource(component_name))
    provider.add_log_record_processor(processor)
    return provider


def build_telemetry_handler(provider: LoggerProvider) -> logging.Handler:
    """OpenTelemetry handler translating LogRecords for ``provider``."""
    # TODO: switch to the opentelemetry-instrumentation-logging handler; the SDK
    # LoggingHandler is deprecated as of opentelemetry-sdk 1.45.
    return LoggingHandler(level=logging.NOTSET, logger_provider=provider)


__all__ = ["build_resource", "build_logger_provider", "build_telemetry_handler"]
