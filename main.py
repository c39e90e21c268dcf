"""Entry point for the age engine CLI.

Run with:
    python main.py 1990-05-20
    python main.py 1990-05-20 --reference-date 2024-05-19
    python main.py --ask

The script configures logging, reads the birthdate (prompting when it is not
given on the command line), computes the age snapshot and prints the report.
With ``--ask`` the question is routed through the assistant agent instead.
"""

import argparse
import datetime
import json
import logging
import sys
import time
import uuid

from age_engine import AgeError, calculate, create_agent
from age_engine.agent import invoke_with_audit
from age_engine.config import settings
from age_engine.formatting import render_report

logger: logging.Logger = logging.getLogger(__name__)

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RESERVED_RECORD_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS and not key.startswith("_"):
                payload[key] = value
        return json.dumps(payload, default=str)


def _configure_logging() -> None:
    """Configure logging from ``LOG_FORMAT`` and ``LOG_LEVEL``.

    LOG_FORMAT=json gives structured JSON output (CloudWatch-friendly); any
    other value falls back to human-readable plaintext.
    """
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    if settings.log_format == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show how much time has passed since a birthdate.",
    )
    parser.add_argument(
        "birth_date",
        nargs="?",
        help="Birthdate in YYYY-MM-DD format. Prompted for when omitted.",
    )
    parser.add_argument(
        "--reference-date",
        default=None,
        help="Date to measure the age on (YYYY-MM-DD). Defaults to today.",
    )
    parser.add_argument(
        "--ask",
        action="store_true",
        help="Route the question through the assistant agent (requires MODEL_ARN).",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    """Configure logging, compute the snapshot and print it.

    An empty birthdate is not an error: nothing is calculated and a
    placeholder line is printed.  Invalid dates or a birthdate after the
    reference date print the engine's message and exit with code 1 so that
    callers (shell scripts, Docker health checks, etc.) can detect failure.

    A structured ``age_calculation`` record is logged after each run with
    the session id, timestamp (ISO UTC) and elapsed_ms.  Dates are not
    logged.
    """
    _configure_logging()
    args = _parse_args(argv)

    birth_raw = args.birth_date
    if birth_raw is None:
        birth_raw = input("Please enter your birthdate (YYYY-MM-DD, e.g. 1990-05-15): ")
    birth_raw = birth_raw.strip()

    if not birth_raw:
        print("No birthdate entered. Provide one to see your age breakdown.")
        return

    session_id = str(uuid.uuid4())
    start = time.monotonic()

    try:
        snapshot = calculate(birth_raw, args.reference_date)
    except AgeError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    if args.ask:
        agent = create_agent()
        prompt = (
            f"My birthdate is {snapshot.birth_date.isoformat()}. "
            f"Measured on {snapshot.reference_date.isoformat()}, how old am I "
            "and which milestones are coming up?"
        )
        invoke_with_audit(agent, prompt, session_id=session_id)
    else:
        print(render_report(snapshot))

    elapsed_ms = (time.monotonic() - start) * 1000
    logger.info(
        "age_calculation",
        extra={
            "session_id": session_id,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "elapsed_ms": round(elapsed_ms, 1),
            "mode": "assistant" if args.ask else "report",
        },
    )


if __name__ == "__main__":
    run()
