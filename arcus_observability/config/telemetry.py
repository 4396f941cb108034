"""Telemetry configuration: env vars, OTel tuning, Application Insights constants."""

import os

from ..utils.env import env_flag

# ---------------------------------------------------------------------------
# Application Insights
# ---------------------------------------------------------------------------
APPLICATIONINSIGHTS_CONNECTION_STRING: str = os.getenv("APPLICATIONINSIGHTS_CONNECTION_STRING", "")
APPLICATIONINSIGHTS_DISABLE_OFFLINE_STORAGE: bool = env_flag("APPLICATIONINSIGHTS_DISABLE_OFFLINE_STORAGE", False)

# ---------------------------------------------------------------------------
# OTel tuning
# ---------------------------------------------------------------------------
OTEL_SERVICE_NAME: str = os.getenv("OTEL_SERVICE_NAME", "")
OTEL_LOGS_EXPORT_INTERVAL_MS: int = int(os.getenv("OTEL_LOGS_EXPORT_INTERVAL_MS", "5000"))
OTEL_LOGS_BATCH_SIZE: int = int(os.getenv("OTEL_LOGS_BATCH_SIZE", "512"))

# ---------------------------------------------------------------------------
# Envelope context tag keys
# ---------------------------------------------------------------------------
TAG_OPERATION_ID = "ai.operation.id"
TAG_OPERATION_PARENT_ID = "ai.operation.parentId"
TAG_CLOUD_ROLE = "ai.cloud.role"

# ---------------------------------------------------------------------------
# Exception telemetry
# ---------------------------------------------------------------------------
EXCEPTION_PROPERTY_FORMAT = "Exception-{0}"
EXCEPTION_PROPERTY_PLACEHOLDER = "{0}"


__all__ = [
    # Application Insights env
    "APPLICATIONINSIGHTS_CONNECTION_STRING",
    "APPLICATIONINSIGHTS_DISABLE_OFFLINE_STORAGE",
    # OTel tuning
    "OTEL_SERVICE_NAME",
    "OTEL_LOGS_EXPORT_INTERVAL_MS",
    "OTEL_LOGS_BATCH_SIZE",
    # Context tags
    "TAG_OPERATION_ID",
    "TAG_OPERATION_PARENT_ID",
    "TAG_CLOUD_ROLE",
    # Exception telemetry
    "EXCEPTION_PROPERTY_FORMAT",
    "EXCEPTION_PROPERTY_PLACEHOLDER",
]
