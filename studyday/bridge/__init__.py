"""Command bridge: JSON payloads in, pure computation, JSON payloads out."""

from .parser import parse_payload
from .dispatch import dispatch, registered_commands
from .codec import decode_timing_result, encode_timing_result, decode_timing_request

__all__ = [
    "dispatch",
    "registered_commands",
    "parse_payload",
    "decode_timing_request",
    "encode_timing_result",
    "decode_timing_result",
]
