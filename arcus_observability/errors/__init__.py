"""Centralized exception classes for the observability package.

Organization:
    - argument.py: Invalid argument errors carrying the parameter name
    - configuration.py: Telemetry configuration errors
    - guards.py: Null/blank argument guards raising ArgumentError
"""

from .argument import ArgumentError
from .guards import require_text, require_not_none
from .configuration import TelemetryConfigurationError

__all__ = [
    # Argument validation
    "ArgumentError",
    "require_text",
    "require_not_none",
    # Configuration
    "TelemetryConfigurationError",
]
