"""Ambient correlation accessors.

An accessor holds the correlation of the current logical operation so that
enrichers can stamp it on every record without the caller passing it along.

``DefaultCorrelationInfoAccessor`` keeps the value in a ``ContextVar`` owned
by the instance: last write wins per accessor, values follow the usual
``contextvars`` propagation (asyncio tasks inherit a copy, threads start
empty), and two accessors never observe each other's values.
"""

from __future__ import annotations

import itertools
from typing import Protocol, runtime_checkable
from contextvars import ContextVar

from .info import CorrelationInfo
from ..errors import ArgumentError

_accessor_ids = itertools.count(1)


@runtime_checkable
class CorrelationInfoAccessor(Protocol):
    """Get/set access to the correlation of the current operation."""

    def get_correlation_info(self) -> CorrelationInfo | None:
        """Return the current correlation or None when unset."""

    def set_correlation_info(self, correlation_info: CorrelationInfo) -> None:
        """Replace the current correlation."""


class DefaultCorrelationInfoAccessor:
    """Context-local correlation accessor."""

    def __init__(self) -> None:
        self._current: ContextVar[CorrelationInfo | None] = ContextVar(
            f"correlation_info_{next(_accessor_ids)}",
            default=None,
        )

    def get_correlation_info(self) -> CorrelationInfo | None:
        return self._current.get()

    def set_correlation_info(self, correlation_info: CorrelationInfo) -> None:
        if correlation_info is None:
            raise ArgumentError("correlation_info", "correlation_info is required, use clear() to unset it")
        if not isinstance(correlation_info, CorrelationInfo):
            raise ArgumentError("correlation_info", "correlation_info must be a CorrelationInfo")
        self._current.set(correlation_info)

    def clear(self) -> None:
        """Forget the current correlation."""
        self._current.set(None)

    @property
    def variable(self) -> ContextVar[CorrelationInfo | None]:
        """The backing context variable (used by scopes to restore values)."""
        return self._current


_default_accessor = DefaultCorrelationInfoAccessor()


def default_correlation_accessor() -> DefaultCorrelationInfoAccessor:
    """Return the process-wide default accessor."""
    return _default_accessor


__all__ = [
    "CorrelationInfoAccessor",
    "DefaultCorrelationInfoAccessor",
    "default_correlation_accessor",
]
