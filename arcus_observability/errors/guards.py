"""Argument guards shared by enrichers, options and correlation types."""

from __future__ import annotations

from typing import Any

from .argument import ArgumentError


def require_not_none(value: Any, argument: str) -> Any:
    """Return ``value`` or raise ArgumentError when it is None."""
    if value is None:
        raise ArgumentError(argument, f"{argument} is required")
    return value


def require_text(value: str | None, argument: str) -> str:
    """Return ``value`` or raise ArgumentError when it is None or blank."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ArgumentError(argument, f"{argument} must be a non-blank string")
    return value


__all__ = ["require_not_none", "require_text"]
