"""Command-line surface for the study-day command bridge.

Usage:
    python -m studyday timingToday '{"createdAt": 1577836800, "createdOffset": 0, "rollover": 4}'
    echo '{}' | python -m studyday localOffset

The result payload goes to stdout. Validation failures print their error code
and message to stderr and exit 2; an unknown command exits 70.
"""

from __future__ import annotations

import sys
import argparse
from collections.abc import Sequence

from .bridge import dispatch, registered_commands
from .logging import configure_logging
from .errors import ValidationError, UnknownCommandError
from .config.bridge import EXIT_OK, EXIT_SOFTWARE, EXIT_VALIDATION


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="studyday",
        description="Send one named request through the study-day bridge.",
    )
    p.add_argument("command", help=f"Command name ({', '.join(registered_commands())}).")
    p.add_argument(
        "args",
        nargs="?",
        default=None,
        help="JSON argument payload; read from stdin when omitted.",
    )
    p.add_argument("--now", type=int, default=None, help="Override the current instant (epoch seconds).")
    p.add_argument("--request-id", default=None, help="Correlation id for log lines.")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging()

    payload = args.args if args.args is not None else sys.stdin.read()
    try:
        result = dispatch(args.command, payload, now_secs=args.now, request_id=args.request_id)
    except ValidationError as exc:
        print(f"{exc.error_code}: {exc.message}", file=sys.stderr)
        return EXIT_VALIDATION
    except UnknownCommandError as exc:
        print(f"fatal: {exc}", file=sys.stderr)
        return EXIT_SOFTWARE

    print(result)
    return EXIT_OK


__all__ = ["main"]
