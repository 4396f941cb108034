"""Telemetry configuration exception."""


class TelemetryConfigurationError(RuntimeError):
    """Raised when a sink cannot be built from the available configuration."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "telemetry is not configured")


__all__ = ["TelemetryConfigurationError"]
