"""Correlation identifiers for the current logical operation."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ArgumentError, require_text


@dataclass(frozen=True)
class CorrelationInfo:
    """Immutable correlation triple attached to log records.

    Attributes:
        operation_id: Identifier of the current operation (required).
        transaction_id: Identifier of the transaction spanning several
            operations, if any.
        operation_parent_id: Identifier of the operation that caused this
            one, if any.
    """

    operation_id: str
    transaction_id: str | None = None
    operation_parent_id: str | None = None

    def __post_init__(self) -> None:
        require_text(self.operation_id, "operation_id")
        for name in ("transaction_id", "operation_parent_id"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ArgumentError(name, f"{name} must be a string or None")


__all__ = ["CorrelationInfo"]
