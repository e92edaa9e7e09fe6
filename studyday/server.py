"""FastAPI surface for the study-day command bridge.

Exposes the in-process bridge to hosts that cannot import it directly:

- ``POST /request/{command}``: the raw request body is the JSON argument
  payload; the response body is the JSON result payload.
- ``GET /healthz`` and ``GET /``: liveness and the registered command names.

Error mapping:
    400: ``ValidationError`` family (payload decode, rollover encoding,
        instant out of range), body
        ``{"error_code": ..., "message": ...}``.
    500: ``UnknownCommandError``; the host is calling a command this build
        does not provide. Logged at CRITICAL by the bridge.
    500: any other failure, body ``{"error_code": "internal", ...}``.

Example:
    $ uvicorn studyday.server:app --host 0.0.0.0 --port 8000
    $ curl -d '{"createdAt": 1577836800, "createdOffset": 0, "rollover": 4}' \\
        http://localhost:8000/request/timingToday
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import ORJSONResponse

from .bridge import dispatch, registered_commands
from .logging import configure_logging
from .errors import ValidationError, UnknownCommandError
from .telemetry import init_telemetry, shutdown_telemetry
from .config.bridge import ERROR_INTERNAL, ERROR_UNKNOWN_COMMAND

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    init_telemetry()
    logger.info("studyday bridge ready: commands=%s", ",".join(registered_commands()))
    try:
        yield
    finally:
        shutdown_telemetry()


app = FastAPI(default_response_class=ORJSONResponse, lifespan=lifespan)


@app.get("/")
async def root():
    """Root endpoint for load balancer health checks."""
    return {"status": "ok", "commands": list(registered_commands())}


@app.get("/healthz")
async def healthz():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/request/{command}")
async def request_command(command: str, request: Request) -> Response:
    """Forward one named request to the bridge."""
    body = await request.body()
    request_id = request.headers.get("x-request-id")
    try:
        result = dispatch(command, body, request_id=request_id)
    except ValidationError as exc:
        return ORJSONResponse(status_code=400, content=exc.to_dict())
    except UnknownCommandError as exc:
        return ORJSONResponse(
            status_code=500,
            content={"error_code": ERROR_UNKNOWN_COMMAND, "message": str(exc)},
        )
    except Exception:
        # Already logged and reported by the bridge.
        return ORJSONResponse(
            status_code=500,
            content={"error_code": ERROR_INTERNAL, "message": "Internal error."},
        )
    return Response(content=result, media_type="application/json")


__all__ = ["app"]
