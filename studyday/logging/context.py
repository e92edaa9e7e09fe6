"""Logging context helpers for consistent structured fields."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import Token, ContextVar

_COMMAND: ContextVar[str] = ContextVar("command", default="-")
_REQUEST_ID: ContextVar[str] = ContextVar("request_id", default="-")


def set_log_context(
    *,
    command: str | None = None,
    request_id: str | None = None,
) -> list[tuple[ContextVar[str], Token[str]]]:
    """Set log context values and return tokens for reset."""
    tokens: list[tuple[ContextVar[str], Token[str]]] = []
    if command is not None:
        tokens.append((_COMMAND, _COMMAND.set(command)))
    if request_id is not None:
        tokens.append((_REQUEST_ID, _REQUEST_ID.set(request_id)))
    return tokens


def reset_log_context(tokens: list[tuple[ContextVar[str], Token[str]]]) -> None:
    """Reset log context values using tokens returned by set_log_context."""
    for var, token in reversed(tokens):
        var.reset(token)


@contextmanager
def log_context(
    *,
    command: str | None = None,
    request_id: str | None = None,
) -> Iterator[None]:
    """Context manager for applying log fields within a block."""
    tokens = set_log_context(command=command, request_id=request_id)
    try:
        yield
    finally:
        reset_log_context(tokens)


def current_log_context() -> dict[str, str]:
    """Snapshot of the active context fields."""
    return {"command": _COMMAND.get(), "request_id": _REQUEST_ID.get()}


def install_log_context() -> None:
    """Install a LogRecord factory that injects context fields."""
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.command = _COMMAND.get()
        record.request_id = _REQUEST_ID.get()
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]


__all__ = [
    "current_log_context",
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
]
