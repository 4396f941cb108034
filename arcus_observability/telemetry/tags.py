"""Map record properties to Application Insights envelope context tags."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

from .options import CorrelationPropertyOptions
from ..config.telemetry import TAG_CLOUD_ROLE, TAG_OPERATION_ID, TAG_OPERATION_PARENT_ID


def _text(properties: Mapping[str, Any], name: str) -> str | None:
    value = properties.get(name)
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


def build_context_tags(
    properties: Mapping[str, Any],
    options: CorrelationPropertyOptions | None = None,
) -> dict[str, str]:
    """Return the context tags derived from enrichment properties.

    The transaction id becomes the operation id and the operation id becomes
    the parent id, so every telemetry item of one transaction is grouped
    under a single operation in the portal.
    """
    options = options or CorrelationPropertyOptions()
    mapping = (
        (TAG_OPERATION_ID, options.transaction_id_property_name),
        (TAG_OPERATION_PARENT_ID, options.operation_id_property_name),
        (TAG_CLOUD_ROLE, options.component_name_property_name),
    )
    tags: dict[str, str] = {}
    for tag, property_name in mapping:
        value = _text(properties, property_name)
        if value is not None:
            tags[tag] = value
    return tags


__all__ = ["build_context_tags"]
