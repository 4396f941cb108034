"""Kubernetes downward API environment variable names."""

KUBERNETES_NODE_NAME_ENV = "KUBERNETES_NODE_NAME"
KUBERNETES_POD_NAME_ENV = "KUBERNETES_POD_NAME"
KUBERNETES_NAMESPACE_ENV = "KUBERNETES_NAMESPACE"


__all__ = [
    "KUBERNETES_NODE_NAME_ENV",
    "KUBERNETES_POD_NAME_ENV",
    "KUBERNETES_NAMESPACE_ENV",
]
