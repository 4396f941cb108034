"""Application Insights sink options.

Startup code adjusts the options through a ``configure`` callback::

    def configure(options: ApplicationInsightsSinkOptions) -> None:
        options.exception.include_properties = True
        options.exception.property_format = "Exception.{0}"
"""

from __future__ import annotations

from string import Formatter

from ..errors import ArgumentError, require_text
from ..config.telemetry import EXCEPTION_PROPERTY_FORMAT, EXCEPTION_PROPERTY_PLACEHOLDER
from ..config.properties import (
    OPERATION_ID_PROPERTY,
    COMPONENT_NAME_PROPERTY,
    TRANSACTION_ID_PROPERTY,
    OPERATION_PARENT_ID_PROPERTY,
)


def _has_placeholder(value: str) -> bool:
    placeholder = EXCEPTION_PROPERTY_PLACEHOLDER.strip("{}")
    try:
        return any(field == placeholder for _, field, _, _ in Formatter().parse(value))
    except ValueError:
        return False


def _validate_property_format(value: str) -> str:
    require_text(value, "property_format")
    # Escaped braces ("{{0}}") render literally and are not a placeholder
    if not _has_placeholder(value):
        raise ArgumentError(
            "property_format",
            f"property_format must contain the {EXCEPTION_PROPERTY_PLACEHOLDER} placeholder",
        )
    try:
        value.format("Property")
    except (AttributeError, IndexError, KeyError, ValueError) as exc:
        raise ArgumentError("property_format", f"property_format cannot be rendered: {exc}") from exc
    return value


class ExceptionTelemetryOptions:
    """How logged exceptions are turned into custom dimensions.

    Attributes:
        include_properties: Add the exception's public properties as
            custom dimensions.
        property_format: Format of the dimension names; ``{0}`` is replaced
            by the property name.
    """

    def __init__(
        self,
        *,
        include_properties: bool = False,
        property_format: str = EXCEPTION_PROPERTY_FORMAT,
    ) -> None:
        self.include_properties = include_properties
        self.property_format = property_format

    @property
    def property_format(self) -> str:
        return self._property_format

    @property_format.setter
    def property_format(self, value: str) -> None:
        self._property_format = _validate_property_format(value)

    def format_property_name(self, name: str) -> str:
        return self._property_format.format(name)


class CorrelationPropertyOptions:
    """Record property names the sink reads correlation and role from."""

    def __init__(
        self,
        *,
        operation_id_property_name: str = OPERATION_ID_PROPERTY,
        transaction_id_property_name: str = TRANSACTION_ID_PROPERTY,
        operation_parent_id_property_name: str = OPERATION_PARENT_ID_PROPERTY,
        component_name_property_name: str = COMPONENT_NAME_PROPERTY,
    ) -> None:
        self.operation_id_property_name = operation_id_property_name
        self.transaction_id_property_name = transaction_id_property_name
        self.operation_parent_id_property_name = operation_parent_id_property_name
        self.component_name_property_name = component_name_property_name

    def __setattr__(self, name: str, value: object) -> None:
        if name.endswith("_property_name"):
            value = require_text(value, name)  # type: ignore[arg-type]
        super().__setattr__(name, value)


class ApplicationInsightsSinkOptions:
    """All user-configurable options of the Application Insights sink."""

    def __init__(self) -> None:
        self.exception = ExceptionTelemetryOptions()
        self.correlation = CorrelationPropertyOptions()


__all__ = [
    "ApplicationInsightsSinkOptions",
    "CorrelationPropertyOptions",
    "ExceptionTelemetryOptions",
]
