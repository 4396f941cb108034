"""Kubernetes runtime enricher.

Reads the node name, pod name and namespace exposed to the container through
the downward API, e.g.::

    env:
      - name: KUBERNETES_NODE_NAME
        valueFrom: {fieldRef: {fieldPath: spec.nodeName}}
      - name: KUBERNETES_POD_NAME
        valueFrom: {fieldRef: {fieldPath: metadata.name}}
      - name: KUBERNETES_NAMESPACE
        valueFrom: {fieldRef: {fieldPath: metadata.namespace}}

Variables that are unset or blank are skipped.
"""

from __future__ import annotations

import logging

from ..utils.env import env_text
from ..config.properties import POD_NAME_PROPERTY, NAMESPACE_PROPERTY, NODE_NAME_PROPERTY
from ..config.kubernetes import KUBERNETES_POD_NAME_ENV, KUBERNETES_NAMESPACE_ENV, KUBERNETES_NODE_NAME_ENV
from .base import LogEnricher, add_property_if_absent


class KubernetesEnricher(LogEnricher):
    """Stamp node, pod and namespace on every record."""

    def __init__(
        self,
        *,
        node_name_property_name: str = NODE_NAME_PROPERTY,
        pod_name_property_name: str = POD_NAME_PROPERTY,
        namespace_property_name: str = NAMESPACE_PROPERTY,
    ) -> None:
        super().__init__()
        sources = (
            (self._property_name(node_name_property_name, "node_name_property_name"), KUBERNETES_NODE_NAME_ENV),
            (self._property_name(pod_name_property_name, "pod_name_property_name"), KUBERNETES_POD_NAME_ENV),
            (self._property_name(namespace_property_name, "namespace_property_name"), KUBERNETES_NAMESPACE_ENV),
        )
        self.properties: dict[str, str] = {}
        for property_name, env_name in sources:
            value = env_text(env_name)
            if value is not None:
                self.properties[property_name] = value

    def enrich(self, record: logging.LogRecord) -> None:
        for name, value in self.properties.items():
            add_property_if_absent(record, name, value)


__all__ = ["KubernetesEnricher"]
