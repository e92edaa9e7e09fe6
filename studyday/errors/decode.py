"""Payload decode exceptions.

Raised by the bridge when an argument payload is empty, is not valid JSON,
is not a JSON object, or lacks / mistypes a required field.
"""

from __future__ import annotations

from .validation import ValidationError


class PayloadDecodeError(ValidationError):
    """Argument payload could not be decoded into a command's arguments.

    Attributes:
        field: Name of the offending field, when the failure is field-specific.
    """

    def __init__(self, error_code: str, message: str, *, field: str | None = None) -> None:
        super().__init__(error_code, message)
        self.field = field

    def to_dict(self) -> dict[str, str]:
        data = super().to_dict()
        if self.field is not None:
            data["field"] = self.field
        return data


__all__ = ["PayloadDecodeError"]
