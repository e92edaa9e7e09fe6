"""Study-day timing: the pure engine plus its clock and rollover helpers."""

from .engine import compute_timing
from .rollover import normalize_rollover_hour
from .clock import now_secs, local_mins_west, configured_timezone

__all__ = [
    "compute_timing",
    "normalize_rollover_hour",
    "now_secs",
    "local_mins_west",
    "configured_timezone",
]
