"""Fluent enrichment registration.

Startup code registers enrichers on the handler (or logger) that should see
them::

    enrich(sink).with_component_name("orders-api").with_correlation_info()
"""

from __future__ import annotations

import logging
from typing import Any

from .base import LogEnricher
from .property import PropertyEnricher
from .version import VersionEnricher
from .kubernetes import KubernetesEnricher
from .component import ComponentNameEnricher
from .correlation import CorrelationInfoEnricher
from ..errors import ArgumentError
from ..correlation import CorrelationInfoAccessor

# Anything exposing ``addFilter``: logging.Logger, logging.Handler, logging.Filterer
EnrichmentTarget = logging.Filterer


class LogEnrichment:
    """Register enrichers on a logger or handler.

    Attributes:
        target: The logger or handler receiving the enrichers.
        enrichers: Enrichers registered so far, in registration order.
    """

    def __init__(self, target: EnrichmentTarget) -> None:
        if target is None or not hasattr(target, "addFilter"):
            raise ArgumentError("target", "target must be a logging.Logger or logging.Handler")
        self.target = target
        self.enrichers: list[LogEnricher] = []

    def with_enricher(self, enricher: LogEnricher) -> LogEnrichment:
        """Register a custom enricher."""
        if enricher is None:
            raise ArgumentError("enricher", "enricher is required")
        self.target.addFilter(enricher)
        self.enrichers.append(enricher)
        return self

    def with_component_name(self, component_name: str, **kwargs: Any) -> LogEnrichment:
        return self.with_enricher(ComponentNameEnricher(component_name, **kwargs))

    def with_correlation_info(
        self,
        accessor: CorrelationInfoAccessor | None = None,
        **kwargs: Any,
    ) -> LogEnrichment:
        return self.with_enricher(CorrelationInfoEnricher(accessor, **kwargs))

    def with_version(self, version: str | None = None, **kwargs: Any) -> LogEnrichment:
        return self.with_enricher(VersionEnricher(version, **kwargs))

    def with_kubernetes_info(self, **kwargs: Any) -> LogEnrichment:
        return self.with_enricher(KubernetesEnricher(**kwargs))

    def with_property(self, name: str, value: Any) -> LogEnrichment:
        return self.with_enricher(PropertyEnricher(name, value))


def enrich(target: EnrichmentTarget) -> LogEnrichment:
    """Start a registration chain on ``target``."""
    return LogEnrichment(target)


__all__ = ["LogEnrichment", "enrich"]
