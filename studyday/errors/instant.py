"""Instants the timezone database cannot place."""

from __future__ import annotations

from .validation import ValidationError
from ..config.bridge import ERROR_INVALID_INSTANT


class InstantOutOfRangeError(ValidationError):
    """An epoch instant outside the span a local offset can be resolved for.

    Attributes:
        value: The rejected instant, seconds since the epoch.
    """

    def __init__(self, value: int) -> None:
        super().__init__(
            ERROR_INVALID_INSTANT,
            f"instant {value} is outside the supported range (years 1..9999)",
        )
        self.value = value


__all__ = ["InstantOutOfRangeError"]
