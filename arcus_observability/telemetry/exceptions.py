"""Flatten an exception's public properties into custom dimensions.

Public properties are the instance attributes a caller set on the exception
(``vars(exc)``) and the ``property`` descriptors declared on user-defined
classes of its MRO. Anything starting with ``_`` is private, and built-in
exception classes contribute nothing (``args``, ``__traceback__``, ...).
"""

from __future__ import annotations

import logging
import builtins
from typing import Any

from .options import ExceptionTelemetryOptions

logger = logging.getLogger(__name__)


def _is_builtin_class(cls: type) -> bool:
    return cls.__module__ == builtins.__name__


def _declared_properties(exc_type: type) -> list[str]:
    names: list[str] = []
    for cls in exc_type.__mro__:
        if _is_builtin_class(cls):
            continue
        for name, member in vars(cls).items():
            if isinstance(member, property) and not name.startswith("_") and name not in names:
                names.append(name)
    return names


def public_exception_properties(exc: BaseException) -> dict[str, Any]:
    """Return the exception's public properties by name."""
    properties: dict[str, Any] = {
        name: value for name, value in vars(exc).items() if not name.startswith("_")
    }
    for name in _declared_properties(type(exc)):
        if name in properties:
            continue
        try:
            properties[name] = getattr(exc, name)
        except Exception as err:  # noqa: BLE001
            logger.debug("Skipping exception property %s.%s: %s", type(exc).__name__, name, err)
    return properties


def flatten_exception_properties(
    exc: BaseException,
    property_format: str | ExceptionTelemetryOptions,
) -> dict[str, str]:
    """Map public exception properties to formatted dimension names.

    ``None`` values are skipped; other values are rendered with ``str``.
    """
    if isinstance(property_format, ExceptionTelemetryOptions):
        options = property_format
    else:
        options = ExceptionTelemetryOptions(property_format=property_format)

    dimensions: dict[str, str] = {}
    for name, value in public_exception_properties(exc).items():
        if value is None:
            continue
        dimensions[options.format_property_name(name)] = str(value)
    return dimensions


__all__ = ["flatten_exception_properties", "public_exception_properties"]
