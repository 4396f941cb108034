"""Application version enricher."""

from __future__ import annotations

import logging
from importlib import metadata

from ..errors import ArgumentError
from ..config.properties import VERSION_PROPERTY
from .base import LogEnricher, add_property_if_absent


def _resolve_version(version: str | None, distribution: str | None) -> str:
    if version is not None:
        if not isinstance(version, str) or not version.strip():
            raise ArgumentError("version", "version must be a non-blank string")
        return version
    if distribution is None or not distribution.strip():
        raise ArgumentError("version", "either version or distribution is required")
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError as exc:
        raise ArgumentError("distribution", f"distribution {distribution!r} is not installed") from exc


class VersionEnricher(LogEnricher):
    """Stamp the application version on every record.

    The version is given directly or resolved once, at construction, from
    the metadata of an installed distribution.
    """

    def __init__(
        self,
        version: str | None = None,
        *,
        distribution: str | None = None,
        property_name: str = VERSION_PROPERTY,
    ) -> None:
        super().__init__()
        self.version = _resolve_version(version, distribution)
        self.property_name = self._property_name(property_name, "property_name")

    def enrich(self, record: logging.LogRecord) -> None:
        add_property_if_absent(record, self.property_name, self.version)


__all__ = ["VersionEnricher"]
