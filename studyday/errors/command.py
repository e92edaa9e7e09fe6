"""Command routing exceptions.

An unknown command name means the host and this library disagree about the
bridge contract. That is a programming error, not a bad input, so it is kept
outside the ``ValidationError`` family and must never be turned into a result.
"""

from __future__ import annotations

from collections.abc import Iterable


class UnknownCommandError(Exception):
    """Raised when a request names a command with no registered handler.

    Attributes:
        command: The command name as received.
        known: Sorted names of the registered commands.
    """

    def __init__(self, command: str, known: Iterable[str] = ()) -> None:
        self.command = command
        self.known = tuple(sorted(known))
        listing = ", ".join(self.known) or "none"
        super().__init__(f"unknown command {command!r} (registered: {listing})")


__all__ = ["UnknownCommandError"]
