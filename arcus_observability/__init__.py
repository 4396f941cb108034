"""Arcus Observability for Python.

Enrichers and an Azure Application Insights sink for the standard
``logging`` module. Records flow through three stages:

- enrichers (``logging.Filter`` objects) add correlation ids, component
  name, version or Kubernetes metadata to each record;
- the Application Insights sink flattens exception properties and
  sanitizes custom dimensions;
- OpenTelemetry and the Azure Monitor exporter batch and transmit the
  records as Application Insights telemetry.

Architecture Overview:
    - config/: Configuration modules (environment-based)
    - correlation/: Correlation types and ambient accessors
    - enrichers/: Record enrichers and fluent registration
    - telemetry/: Application Insights sink, options and exporter
    - logging/: Root logging configuration
    - errors/: Exception types and argument guards

Example::

    import logging
    from arcus_observability import add_application_insights_sink, enrich

    sink = add_application_insights_sink(component_name="orders-api")
    enrich(sink).with_component_name("orders-api").with_correlation_info()
    logging.getLogger(__name__).error("payment failed", exc_info=True)

Environment Variables:
    - APPLICATIONINSIGHTS_CONNECTION_STRING: Connection string used when
      none is passed to ``add_application_insights_sink``
    - OTEL_SERVICE_NAME: Default cloud role name
    - APP_LOG_LEVEL / APP_LOG_FORMAT: Root logging configuration
"""

from .errors import ArgumentError, TelemetryConfigurationError
from .logging import configure_logging
from .correlation import (
    CorrelationInfo,
    CorrelationInfoAccessor,
    DefaultCorrelationInfoAccessor,
    correlation_scope,
    default_correlation_accessor,
)
from .enrichers import (
    LogEnricher,
    LogEnrichment,
    PropertyEnricher,
    VersionEnricher,
    KubernetesEnricher,
    ComponentNameEnricher,
    CorrelationInfoEnricher,
    enrich,
)
from .telemetry import (
    ApplicationInsightsSink,
    ExceptionTelemetryOptions,
    CorrelationPropertyOptions,
    ApplicationInsightsSinkOptions,
    shutdown_sinks,
    add_application_insights_sink,
)

__all__ = [
    # Errors
    "ArgumentError",
    "TelemetryConfigurationError",
    # Logging
    "configure_logging",
    # Correlation
    "CorrelationInfo",
    "CorrelationInfoAccessor",
    "DefaultCorrelationInfoAccessor",
    "correlation_scope",
    "default_correlation_accessor",
    # Enrichers
    "LogEnricher",
    "LogEnrichment",
    "ComponentNameEnricher",
    "CorrelationInfoEnricher",
    "KubernetesEnricher",
    "PropertyEnricher",
    "VersionEnricher",
    "enrich",
    # Telemetry
    "ApplicationInsightsSink",
    "ApplicationInsightsSinkOptions",
    "CorrelationPropertyOptions",
    "ExceptionTelemetryOptions",
    "add_application_insights_sink",
    "shutdown_sinks",
]
