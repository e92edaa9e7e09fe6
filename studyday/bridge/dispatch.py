"""Named-command dispatch across the host boundary.

``dispatch`` is the single entry point a host calls: a command name plus a
JSON argument payload in, a JSON result payload out. It holds no state and
does no I/O beyond reading the clock once per call.

Failures:
    - ``ValidationError`` subclasses (payload decode, rollover encoding,
      instants outside the resolvable range) are raised to the host with
      their error codes intact.
    - ``UnknownCommandError`` means the host was built against a different
      command set. It is logged at CRITICAL, reported to Sentry, and raised.
"""

from __future__ import annotations

import json
import time
import uuid
import logging
from typing import Any
from collections.abc import Callable

from ..timing import clock
from .parser import parse_payload
from ..logging import log_context
from ..errors.classify import classify_error
from ..errors.command import UnknownCommandError
from ..errors.validation import ValidationError
from ..telemetry.sentry import capture_error
from ..telemetry.traces import dispatch_span
from ..telemetry.instruments import get_metrics
from ..config.bridge import COMMAND_LOCAL_OFFSET, COMMAND_TIMING_TODAY
from .commands import handle_local_offset, handle_timing_today

logger = logging.getLogger(__name__)

CommandHandlerFn = Callable[..., dict[str, Any]]

_COMMAND_HANDLERS: dict[str, CommandHandlerFn] = {
    COMMAND_TIMING_TODAY: handle_timing_today,
    COMMAND_LOCAL_OFFSET: handle_local_offset,
}


def registered_commands() -> tuple[str, ...]:
    """Sorted names of every command the bridge can route."""
    return tuple(sorted(_COMMAND_HANDLERS))


def _reject_unknown_command(command: str) -> UnknownCommandError:
    exc = UnknownCommandError(command, _COMMAND_HANDLERS)
    get_metrics().errors_total.add(1, {"command": "unknown", "category": classify_error(exc)})
    logger.critical("bridge contract violation: %s", exc)
    capture_error(exc)
    return exc


def dispatch(
    command: str,
    args: str | bytes,
    *,
    now_secs: int | None = None,
    request_id: str | None = None,
) -> str:
    """Route a named request to its handler and return the encoded result.

    Args:
        command: Registered command name, e.g. ``"timingToday"``.
        args: JSON object payload with the command's arguments.
        now_secs: Current instant; read from the wall clock when omitted.
        request_id: Correlation id for logs and traces; generated when omitted.

    Returns:
        JSON object payload with the command's result.

    Raises:
        UnknownCommandError: ``command`` has no registered handler.
        ValidationError: the payload could not be decoded or holds an
            unusable value.
    """
    rid = request_id or uuid.uuid4().hex[:12]
    with log_context(command=str(command), request_id=rid):
        handler = _COMMAND_HANDLERS.get(command)
        if handler is None:
            raise _reject_unknown_command(command)

        metrics = get_metrics()
        start = time.perf_counter()
        with dispatch_span(command=command, request_id=rid) as span:
            try:
                payload = parse_payload(args)
                now = clock.now_secs() if now_secs is None else now_secs
                result = handler(payload, now_secs=now)
            except ValidationError as exc:
                span.set_attribute("error.code", exc.error_code)
                metrics.errors_total.add(1, {"command": command, "category": classify_error(exc)})
                metrics.requests_total.add(1, {"command": command, "status": "rejected"})
                logger.info("bridge rejected request: %s: %s", exc.error_code, exc.message)
                raise
            except Exception as exc:
                metrics.errors_total.add(1, {"command": command, "category": classify_error(exc)})
                metrics.requests_total.add(1, {"command": command, "status": "failed"})
                logger.exception("bridge handler failed")
                capture_error(exc)
                raise

        metrics.request_latency.record(time.perf_counter() - start, {"command": command})
        metrics.requests_total.add(1, {"command": command, "status": "ok"})
        return json.dumps(result)


__all__ = ["dispatch", "registered_commands"]
