"""Centralized state dataclasses for the study-day bridge.

This module re-exports all state definitions from their respective modules,
providing a single import point for state types.
"""

from .timing import OffsetResult, TimingResult, OffsetRequest, TimingRequest

__all__ = [
    "OffsetRequest",
    "OffsetResult",
    "TimingRequest",
    "TimingResult",
]
