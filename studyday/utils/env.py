"""Environment helper utilities."""

from __future__ import annotations

import os


def env_int(name: str, default: int) -> int:
    """Read a signed integer env var, falling back to ``default`` when unset or blank."""
    value = (os.getenv(name) or "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def env_str(name: str) -> str | None:
    """Return a stripped env value, or None when unset or blank."""
    value = (os.getenv(name) or "").strip()
    return value or None


__all__ = ["env_int", "env_str"]
