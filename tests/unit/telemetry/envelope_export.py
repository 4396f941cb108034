"""Offline tests of the full OpenTelemetry to Application Insights envelope path."""

from __future__ import annotations

import pytest
from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import SimpleLogRecordProcessor

from tests.helpers.exceptions import SpyException
from tests.helpers.records import CapturingLogExporter, isolated_logger
from arcus_observability.enrichers import enrich
from arcus_observability.correlation import CorrelationInfo, DefaultCorrelationInfoAccessor
from arcus_observability.telemetry import ApplicationInsightsSink, ApplicationInsightsSinkOptions
from arcus_observability.telemetry.otel import build_resource, build_telemetry_handler
from arcus_observability.telemetry.exporter import ApplicationInsightsLogExporter

_CONNECTION_STRING = (
    "InstrumentationKey=00000000-0000-0000-0000-000000000000;"
    "IngestionEndpoint=https://localhost/"
)


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APPLICATIONINSIGHTS_STATSBEAT_DISABLED_ALL", "true")
    exporter = CapturingLogExporter()
    provider = LoggerProvider(resource=build_resource("resource-role"))
    provider.add_log_record_processor(SimpleLogRecordProcessor(exporter))
    yield provider, exporter
    provider.shutdown()


def _log_failure(provider: LoggerProvider) -> None:
    options = ApplicationInsightsSinkOptions()
    options.exception.include_properties = True
    sink = ApplicationInsightsSink(build_telemetry_handler(provider), options=options)
    accessor = DefaultCorrelationInfoAccessor()
    accessor.set_correlation_info(CorrelationInfo("op-1", "tx-1"))
    enrich(sink).with_component_name("orders-api").with_correlation_info(accessor)

    logger = isolated_logger(sink)
    try:
        raise SpyException("payment declined", spy_property="foo")
    except SpyException:
        logger.critical("payment declined", exc_info=True)


def _envelope(exported_record):
    exporter = ApplicationInsightsLogExporter(
        connection_string=_CONNECTION_STRING,
        disable_offline_storage=True,
    )
    try:
        return exporter._log_to_envelope(exported_record)
    finally:
        exporter.shutdown()


def test_exception_envelope_carries_properties_and_context_tags(captured) -> None:
    provider, exporter = captured
    _log_failure(provider)

    assert len(exporter.exported) == 1
    envelope = _envelope(exporter.exported[0])

    assert envelope.data.base_type == "ExceptionData"
    properties = envelope.data.base_data.properties
    assert properties["Exception-spy_property"] == "foo"
    assert properties["TransactionId"] == "tx-1"
    assert envelope.tags["ai.operation.id"] == "tx-1"
    assert envelope.tags["ai.operation.parentId"] == "op-1"
    assert envelope.tags["ai.cloud.role"] == "orders-api"


def test_envelope_without_correlation_keeps_resource_role(captured) -> None:
    provider, exporter = captured
    sink = ApplicationInsightsSink(build_telemetry_handler(provider))
    isolated_logger(sink).warning("no correlation here")

    envelope = _envelope(exporter.exported[0])

    assert envelope.tags["ai.cloud.role"] == "resource-role"
