"""Unit tests for sink creation and shutdown."""

from __future__ import annotations

import logging

import pytest

from tests.helpers.records import RecordingHandler, RecordingProvider, isolated_logger
from arcus_observability.errors import TelemetryConfigurationError
from arcus_observability.telemetry import ApplicationInsightsSink, setup


@pytest.fixture
def built(monkeypatch: pytest.MonkeyPatch) -> dict:
    calls: dict = {"providers": [], "handlers": []}

    def fake_provider(**kwargs):
        provider = RecordingProvider()
        calls["providers"].append((kwargs, provider))
        return provider

    def fake_handler(provider):
        handler = RecordingHandler()
        calls["handlers"].append((provider, handler))
        return handler

    monkeypatch.setattr(setup, "build_logger_provider", fake_provider)
    monkeypatch.setattr(setup, "build_telemetry_handler", fake_handler)
    return calls


def test_missing_connection_string_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(setup, "APPLICATIONINSIGHTS_CONNECTION_STRING", "")
    with pytest.raises(TelemetryConfigurationError):
        setup.add_application_insights_sink(isolated_logger())


def test_sink_is_attached_and_configured(built: dict) -> None:
    logger = isolated_logger()

    def configure(options) -> None:
        options.exception.include_properties = True

    sink = setup.add_application_insights_sink(
        logger,
        connection_string="InstrumentationKey=00000000-0000-0000-0000-000000000000",
        component_name="orders-api",
        configure=configure,
    )

    assert isinstance(sink, ApplicationInsightsSink)
    assert sink in logger.handlers
    assert sink.options.exception.include_properties is True
    kwargs, provider = built["providers"][0]
    assert kwargs["connection_string"] == "InstrumentationKey=00000000-0000-0000-0000-000000000000"
    assert kwargs["component_name"] == "orders-api"
    assert kwargs["correlation"] is sink.options.correlation
    assert built["handlers"][0] == (provider, sink.handler)


def test_connection_string_from_environment(built: dict, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(setup, "APPLICATIONINSIGHTS_CONNECTION_STRING", "InstrumentationKey=abc")
    setup.add_application_insights_sink(isolated_logger())
    assert built["providers"][0][0]["connection_string"] == "InstrumentationKey=abc"


def test_logger_can_be_passed_by_keyword(built: dict) -> None:
    target = isolated_logger()
    sink = setup.add_application_insights_sink(logger=target, connection_string="InstrumentationKey=abc")
    assert sink in target.handlers


def test_root_logger_is_default_target(built: dict) -> None:
    sink = setup.add_application_insights_sink(connection_string="InstrumentationKey=abc")
    assert sink in logging.getLogger().handlers


def test_shutdown_detaches_and_closes(built: dict) -> None:
    logger = isolated_logger()
    sink = setup.add_application_insights_sink(logger, connection_string="InstrumentationKey=abc")
    provider = built["providers"][0][1]

    setup.shutdown_sinks()
    setup.shutdown_sinks()

    assert sink not in logger.handlers
    assert provider.shutdowns == 1
