"""Sink lifecycle orchestration (create / shut down)."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .sink import ApplicationInsightsSink
from .options import ApplicationInsightsSinkOptions
from ..errors import TelemetryConfigurationError
from .otel import build_logger_provider, build_telemetry_handler
from ..config.telemetry import OTEL_SERVICE_NAME, APPLICATIONINSIGHTS_CONNECTION_STRING

_log = logging.getLogger(__name__)

ConfigureOptions = Callable[[ApplicationInsightsSinkOptions], None]

_sinks: list[tuple[logging.Logger, ApplicationInsightsSink]] = []


def build_sink_options(configure: ConfigureOptions | None = None) -> ApplicationInsightsSinkOptions:
    """Create default options and let ``configure`` adjust them."""
    options = ApplicationInsightsSinkOptions()
    if configure is not None:
        configure(options)
    return options


def add_application_insights_sink(
    logger: logging.Logger | None = None,
    *,
    connection_string: str | None = None,
    component_name: str | None = None,
    configure: ConfigureOptions | None = None,
    level: int = logging.NOTSET,
) -> ApplicationInsightsSink:
    """Attach an Application Insights sink to ``logger`` (root when omitted).

    Raises:
        TelemetryConfigurationError: No connection string was given and
            APPLICATIONINSIGHTS_CONNECTION_STRING is not set.
    """
    resolved_connection_string = (connection_string or APPLICATIONINSIGHTS_CONNECTION_STRING).strip()
    if not resolved_connection_string:
        raise TelemetryConfigurationError(
            "Application Insights connection string missing "
            "(pass connection_string or set APPLICATIONINSIGHTS_CONNECTION_STRING)"
        )
    options = build_sink_options(configure)
    role_name = component_name or OTEL_SERVICE_NAME or None

    provider = build_logger_provider(
        connection_string=resolved_connection_string,
        component_name=role_name,
        correlation=options.correlation,
    )
    sink = ApplicationInsightsSink(
        build_telemetry_handler(provider),
        options=options,
        provider=provider,
        level=level,
    )
    target = logger if logger is not None else logging.getLogger()
    target.addHandler(sink)
    _sinks.append((target, sink))
    _log.info(
        "Application Insights sink initialized: logger=%s role=%s include_exception_properties=%s",
        target.name,
        role_name or "-",
        options.exception.include_properties,
    )
    return sink


def shutdown_sinks() -> None:
    """Detach and close every sink created here. Idempotent."""
    while _sinks:
        target, sink = _sinks.pop()
        target.removeHandler(sink)
        sink.close()


__all__ = ["add_application_insights_sink", "build_sink_options", "shutdown_sinks"]
