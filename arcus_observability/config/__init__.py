"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- logging: root logger level and format
- telemetry: Application Insights connection and OTel export tuning
- properties: default property names written by the enrichers
- kubernetes: downward API environment variable names
"""

from .logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT, PACKAGE_LOGGER_NAME
from .telemetry import (
    TAG_CLOUD_ROLE,
    TAG_OPERATION_ID,
    OTEL_SERVICE_NAME,
    OTEL_LOGS_BATCH_SIZE,
    TAG_OPERATION_PARENT_ID,
    EXCEPTION_PROPERTY_FORMAT,
    OTEL_LOGS_EXPORT_INTERVAL_MS,
    EXCEPTION_PROPERTY_PLACEHOLDER,
    APPLICATIONINSIGHTS_CONNECTION_STRING,
    APPLICATIONINSIGHTS_DISABLE_OFFLINE_STORAGE,
)
from .properties import (
    POD_NAME_PROPERTY,
    VERSION_PROPERTY,
    NAMESPACE_PROPERTY,
    NODE_NAME_PROPERTY,
    OPERATION_ID_PROPERTY,
    COMPONENT_NAME_PROPERTY,
    TRANSACTION_ID_PROPERTY,
    CORRELATION_INFO_ATTRIBUTE,
    OPERATION_PARENT_ID_PROPERTY,
)
from .kubernetes import KUBERNETES_POD_NAME_ENV, KUBERNETES_NAMESPACE_ENV, KUBERNETES_NODE_NAME_ENV

__all__ = [
    # logging
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
    "PACKAGE_LOGGER_NAME",
    # telemetry
    "APPLICATIONINSIGHTS_CONNECTION_STRING",
    "APPLICATIONINSIGHTS_DISABLE_OFFLINE_STORAGE",
    "OTEL_SERVICE_NAME",
    "OTEL_LOGS_EXPORT_INTERVAL_MS",
    "OTEL_LOGS_BATCH_SIZE",
    "TAG_OPERATION_ID",
    "TAG_OPERATION_PARENT_ID",
    "TAG_CLOUD_ROLE",
    "EXCEPTION_PROPERTY_FORMAT",
    "EXCEPTION_PROPERTY_PLACEHOLDER",
    # properties
    "COMPONENT_NAME_PROPERTY",
    "VERSION_PROPERTY",
    "OPERATION_ID_PROPERTY",
    "TRANSACTION_ID_PROPERTY",
    "OPERATION_PARENT_ID_PROPERTY",
    "NODE_NAME_PROPERTY",
    "POD_NAME_PROPERTY",
    "NAMESPACE_PROPERTY",
    "CORRELATION_INFO_ATTRIBUTE",
    # kubernetes
    "KUBERNETES_NODE_NAME_ENV",
    "KUBERNETES_POD_NAME_ENV",
    "KUBERNETES_NAMESPACE_ENV",
]
