"""Unit tests for context tag mapping and the envelope exporter hook."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from arcus_observability.telemetry import CorrelationPropertyOptions, build_context_tags
from arcus_observability.telemetry.exporter import AzureMonitorLogExporter, ApplicationInsightsLogExporter


def test_transaction_and_operation_map_to_operation_tags() -> None:
    tags = build_context_tags(
        {"OperationId": "op-1", "TransactionId": "tx-1", "OperationParentId": "parent-1"}
    )
    assert tags == {"ai.operation.id": "tx-1", "ai.operation.parentId": "op-1"}


def test_component_name_maps_to_cloud_role() -> None:
    assert build_context_tags({"ComponentName": "orders-api"}) == {"ai.cloud.role": "orders-api"}


def test_missing_or_blank_properties_produce_no_tags() -> None:
    assert build_context_tags({"TransactionId": " ", "Other": "value"}) == {}


def test_custom_property_names_are_honored() -> None:
    options = CorrelationPropertyOptions(
        transaction_id_property_name="Transaction",
        component_name_property_name="Role",
    )
    tags = build_context_tags({"Transaction": "tx-9", "Role": "billing", "TransactionId": "ignored"}, options)
    assert tags == {"ai.operation.id": "tx-9", "ai.cloud.role": "billing"}


def _exporter(correlation: CorrelationPropertyOptions | None = None) -> ApplicationInsightsLogExporter:
    # Bypass the network-facing constructor; only the envelope hook is exercised.
    exporter = ApplicationInsightsLogExporter.__new__(ApplicationInsightsLogExporter)
    exporter._correlation = correlation or CorrelationPropertyOptions()
    return exporter


def test_exporter_overrides_envelope_tags(monkeypatch: pytest.MonkeyPatch) -> None:
    envelope = SimpleNamespace(tags={"ai.operation.id": "0" * 32, "ai.cloud.role": "resource-role"})
    monkeypatch.setattr(AzureMonitorLogExporter, "_log_to_envelope", lambda self, log_data: envelope)
    log_data = SimpleNamespace(
        log_record=SimpleNamespace(attributes={"TransactionId": "tx-1", "OperationId": "op-1", "ComponentName": "orders"})
    )

    result = _exporter()._log_to_envelope(log_data)

    assert result.tags == {
        "ai.operation.id": "tx-1",
        "ai.operation.parentId": "op-1",
        "ai.cloud.role": "orders",
    }


def test_exporter_keeps_tags_without_properties(monkeypatch: pytest.MonkeyPatch) -> None:
    envelope = SimpleNamespace(tags={"ai.cloud.role": "resource-role"})
    monkeypatch.setattr(AzureMonitorLogExporter, "_log_to_envelope", lambda self, log_data: envelope)
    log_data = SimpleNamespace(log_record=SimpleNamespace(attributes=None))

    assert _exporter()._log_to_envelope(log_data).tags == {"ai.cloud.role": "resource-role"}
