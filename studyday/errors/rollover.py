"""Rollover-hour encoding exceptions."""

from __future__ import annotations

from typing import Any

from .validation import ValidationError
from ..config.bridge import ERROR_INVALID_ROLLOVER


class InvalidRolloverError(ValidationError):
    """A rollover value that cannot be mapped onto an hour of the day.

    Attributes:
        value: The rejected value as received.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(
            ERROR_INVALID_ROLLOVER,
            f"rollover must be an integer hour in -23..23, got {value!r}",
        )
        self.value = value


__all__ = ["InvalidRolloverError"]
