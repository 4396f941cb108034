"""Log record enrichers and their registration helpers."""

from .property import PropertyEnricher
from .version import VersionEnricher
from .kubernetes import KubernetesEnricher
from .component import ComponentNameEnricher
from .correlation import CorrelationInfoEnricher
from .base import LogEnricher, add_property_if_absent
from .registration import LogEnrichment, enrich

__all__ = [
    # Base
    "LogEnricher",
    "add_property_if_absent",
    # Enrichers
    "ComponentNameEnricher",
    "CorrelationInfoEnricher",
    "KubernetesEnricher",
    "PropertyEnricher",
    "VersionEnricher",
    # Registration
    "LogEnrichment",
    "enrich",
]
