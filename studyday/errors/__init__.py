"""Centralized exception classes for the study-day bridge.

This module re-exports all domain-specific exceptions from their respective
modules, providing a single import point for error handling.

Organization:
    - validation.py: Base input validation error with error codes
    - decode.py: Argument payload decode errors
    - rollover.py: Rollover-hour encodings with no canonical hour
    - instant.py: Epoch instants outside the resolvable date range
    - command.py: Unknown command names (fatal)
    - classify.py: Exception-to-telemetry label mapping
"""

from .classify import classify_error
from .decode import PayloadDecodeError
from .validation import ValidationError
from .command import UnknownCommandError
from .rollover import InvalidRolloverError
from .instant import InstantOutOfRangeError

__all__ = [
    # Validation
    "ValidationError",
    "PayloadDecodeError",
    "InvalidRolloverError",
    "InstantOutOfRangeError",
    # Routing
    "UnknownCommandError",
    # Classification
    "classify_error",
]
