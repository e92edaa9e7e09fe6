"""Input validation exceptions with structured error codes.

This module provides the base validation exception that carries both a
human-readable message and a machine-parseable error code. The bridge
surfaces these to its host unchanged.
"""


class ValidationError(Exception):
    """Structured validation failure with error code metadata.

    Raised when caller-supplied input cannot be used as given. Hosts can
    recover by correcting the input and retrying.

    Attributes:
        error_code: Machine-parseable error identifier.
        message: Human-readable error description.
    """

    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error_code": self.error_code, "message": self.message}


__all__ = ["ValidationError"]
