"""Component name enricher.

The Application Insights sink maps the component name property to the
cloud role name of every telemetry item.
"""

from __future__ import annotations

import logging

from ..errors import require_text
from ..config.properties import COMPONENT_NAME_PROPERTY
from .base import LogEnricher, add_property_if_absent


class ComponentNameEnricher(LogEnricher):
    """Stamp the logical component name on every record.

    Attributes:
        component_name: Name of the application or service component.
        property_name: Record property receiving the name.
    """

    def __init__(self, component_name: str, *, property_name: str = COMPONENT_NAME_PROPERTY) -> None:
        super().__init__()
        self.component_name = require_text(component_name, "component_name")
        self.property_name = self._property_name(property_name, "property_name")

    def enrich(self, record: logging.LogRecord) -> None:
        add_property_if_absent(record, self.property_name, self.component_name)


__all__ = ["ComponentNameEnricher"]
