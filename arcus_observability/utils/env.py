"""Environment helper utilities."""

from __future__ import annotations

import os


def env_flag(name: str, default: bool) -> bool:
    """Return True/False for typical truthy env encodings."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_text(name: str) -> str | None:
    """Return a stripped env value, or None when unset or blank."""
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


__all__ = ["env_flag", "env_text"]
