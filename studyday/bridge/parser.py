"""Argument payload parsing for the command bridge."""

from __future__ import annotations

import json
from typing import Any

from ..errors.decode import PayloadDecodeError
from ..config.bridge import ERROR_INVALID_JSON, ERROR_EMPTY_PAYLOAD, ERROR_INVALID_PAYLOAD


def parse_payload(raw: str | bytes | None) -> dict[str, Any]:
    """Parse a JSON argument payload into a dict.

    Raises:
        PayloadDecodeError: the payload is blank, not JSON (including JSON nested
            past the interpreter recursion limit), or not a JSON object.
    """
    if isinstance(raw, bytes | bytearray):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadDecodeError(ERROR_INVALID_JSON, "Payload must be UTF-8 encoded JSON.") from exc

    text = (raw or "").strip()
    if not text:
        raise PayloadDecodeError(ERROR_EMPTY_PAYLOAD, "Empty payload.")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PayloadDecodeError(ERROR_INVALID_JSON, f"Payload must be valid JSON: {exc.msg}.") from exc
    except RecursionError as exc:
        raise PayloadDecodeError(ERROR_INVALID_JSON, "Payload is nested too deeply.") from exc

    if not isinstance(data, dict):
        raise PayloadDecodeError(ERROR_INVALID_PAYLOAD, "Payload must be a JSON object.")
    return data


__all__ = ["parse_payload"]
