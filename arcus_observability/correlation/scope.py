"""Scoped correlation helpers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from .info import CorrelationInfo
from ..errors import ArgumentError, require_not_none
from .accessor import CorrelationInfoAccessor, DefaultCorrelationInfoAccessor, default_correlation_accessor


@contextmanager
def correlation_scope(
    correlation_info: CorrelationInfo,
    *,
    accessor: CorrelationInfoAccessor | None = None,
) -> Iterator[CorrelationInfo]:
    """Set ``correlation_info`` on an accessor for the duration of a block.

    The previous value is restored on exit. Accessors other than the default
    implementation are restored by setting the previous value back, or by
    calling their ``clear()`` when there was none.

    Raises:
        ArgumentError: The accessor holds no correlation and has no
            ``clear()`` to unset the scoped one afterwards.
    """
    require_not_none(correlation_info, "correlation_info")
    target = accessor if accessor is not None else default_correlation_accessor()

    if isinstance(target, DefaultCorrelationInfoAccessor):
        token = target.variable.set(correlation_info)
        try:
            yield correlation_info
        finally:
            target.variable.reset(token)
        return

    previous = target.get_correlation_info()
    clear = getattr(target, "clear", None)
    if previous is None and not callable(clear):
        raise ArgumentError("accessor", "accessor holds no correlation and cannot be cleared after the scope")
    target.set_correlation_info(correlation_info)
    try:
        yield correlation_info
    finally:
        if previous is not None:
            target.set_correlation_info(previous)
        else:
            clear()


__all__ = ["correlation_scope"]
