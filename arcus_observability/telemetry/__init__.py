"""Public telemetry API: Application Insights sink, options and setup."""

from .tags import build_context_tags
from .sink import ApplicationInsightsSink, custom_properties
from .setup import shutdown_sinks, build_sink_options, add_application_insights_sink
from .exceptions import public_exception_properties, flatten_exception_properties
from .options import ExceptionTelemetryOptions, CorrelationPropertyOptions, ApplicationInsightsSinkOptions

__all__ = [
    "add_application_insights_sink",
    "shutdown_sinks",
    "build_sink_options",
    "ApplicationInsightsSink",
    "ApplicationInsightsSinkOptions",
    "ExceptionTelemetryOptions",
    "CorrelationPropertyOptions",
    "build_context_tags",
    "custom_properties",
    "flatten_exception_properties",
    "public_exception_properties",
]
