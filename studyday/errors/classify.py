"""Exception classification helpers for metrics and telemetry labels."""

from __future__ import annotations

from .decode import PayloadDecodeError
from .command import UnknownCommandError
from .rollover import InvalidRolloverError
from .instant import InstantOutOfRangeError
from .validation import ValidationError

# Subclasses come before their bases; first match wins.
ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (PayloadDecodeError, "decode"),
    (InvalidRolloverError, "rollover"),
    (InstantOutOfRangeError, "instant"),
    (ValidationError, "validation"),
    (UnknownCommandError, "unknown_command"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a metric-friendly category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
