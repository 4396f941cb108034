"""Default log record property names written by the enrichers."""

COMPONENT_NAME_PROPERTY = "ComponentName"
VERSION_PROPERTY = "version"

OPERATION_ID_PROPERTY = "OperationId"
TRANSACTION_ID_PROPERTY = "TransactionId"
OPERATION_PARENT_ID_PROPERTY = "OperationParentId"

NODE_NAME_PROPERTY = "NodeName"
POD_NAME_PROPERTY = "PodName"
NAMESPACE_PROPERTY = "Namespace"

# Record attribute used to pass a CorrelationInfo explicitly via ``extra=``
CORRELATION_INFO_ATTRIBUTE = "correlation_info"


__all__ = [
    "COMPONENT_NAME_PROPERTY",
    "VERSION_PROPERTY",
    "OPERATION_ID_PROPERTY",
    "TRANSACTION_ID_PROPERTY",
    "OPERATION_PARENT_ID_PROPERTY",
    "NODE_NAME_PROPERTY",
    "POD_NAME_PROPERTY",
    "NAMESPACE_PROPERTY",
    "CORRELATION_INFO_ATTRIBUTE",
]
