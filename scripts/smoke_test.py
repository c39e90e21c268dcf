"""Smoke checks for an installed age_engine.

The engine checks run everywhere and need no credentials.  When
``MODEL_ARN`` is configured (environment or ``.env``), the script also
builds the assistant with ``create_agent()`` and asks it one question
through ``invoke_with_audit``; the answer must mention days and contain a
number.  Pass ``--offline`` to skip that call even when a model is
configured.

Usage
-----
    python scripts/smoke_test.py
    python scripts/smoke_test.py --offline

Exit codes
----------
0   Every check that ran passed.
1   At least one check failed.
"""

import argparse
import datetime
import json
import sys
import traceback
from pathlib import Path
from typing import Any, Callable

# Make age_engine importable when the script is run from a checkout.
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

_ASSISTANT_PROMPT = (
    "My birthdate is 1990-05-20 and today is 2024-05-19. "
    "How many days old am I and when is my next birthday?"
)

Check = tuple[str, Callable[[], Any]]


def _run(checks: list[Check]) -> list[str]:
    """Run each check, print its status and return the names that failed."""
    failures: list[str] = []
    for name, fn in checks:
        try:
            fn()
        except Exception:  # noqa: BLE001
            reason = traceback.format_exc().strip().splitlines()[-1]
            print(f"  [FAIL] {name}: {reason}")
            failures.append(name)
        else:
            print(f"  [PASS] {name}")
    return failures


def check_public_api() -> None:
    import age_engine

    missing = [name for name in age_engine.__all__ if not hasattr(age_engine, name)]
    assert not missing, f"age_engine.__all__ names missing attributes: {missing}"


def check_born_today() -> None:
    """A birth on the reference date is zero days old and waits a full year."""
    from age_engine import calculate

    snapshot = calculate("2000-01-01", "2000-01-01")
    assert (snapshot.years, snapshot.months, snapshot.days) == (0, 0, 0)
    assert snapshot.next_birthday == datetime.date(2001, 1, 1), snapshot.next_birthday
    assert snapshot.days_until_next_birthday == 366, snapshot.days_until_next_birthday


def check_month_end_borrow() -> None:
    from age_engine import calculate

    snapshot = calculate("2024-01-31", "2024-03-30")
    breakdown = (snapshot.years, snapshot.months, snapshot.days)
    assert breakdown == (0, 1, 28), breakdown


def check_report_renders() -> None:
    from age_engine import calculate
    from age_engine.formatting import render_report

    report = render_report(calculate("1990-05-20", "2024-05-19"))
    for heading in ("Time ledger", "Next birthday", "Milestones", "Cosmic metrics"):
        assert heading in report, f"report has no {heading!r} section"


def check_calculate_age_tool() -> None:
    from age_engine.tools import calculate_age

    payload = json.loads(calculate_age("1990-01-01", "2000-01-01"))
    assert payload["total_days"] == 3652, payload["total_days"]
    assert "lunar_cycles" in payload["cosmic"]


def check_assistant_answers() -> None:
    """Ask the configured Bedrock model one question end to end."""
    from age_engine.agent import create_agent, invoke_with_audit

    answer = str(invoke_with_audit(create_agent(), _ASSISTANT_PROMPT, user_id="smoke-test"))
    assert answer.strip(), "assistant returned an empty answer"
    assert "day" in answer.lower(), f"answer does not mention days: {answer!r}"
    assert any(ch.isdigit() for ch in answer), f"answer has no numbers: {answer!r}"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Smoke check the age_engine package.")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the assistant call even when MODEL_ARN is set.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    checks: list[Check] = [
        ("age_engine exports its public API", check_public_api),
        ("Born-today snapshot (2000-01-01)", check_born_today),
        ("Month-end borrow (2024-01-31 / 2024-03-30)", check_month_end_borrow),
        ("Plain-text report renders every section", check_report_renders),
        ("calculate_age tool returns a JSON snapshot", check_calculate_age_tool),
    ]

    from age_engine.config import settings

    if args.offline:
        print("[smoke_test] --offline given; skipping the assistant call.")
    elif not settings.model_arn:
        print("[smoke_test] MODEL_ARN is not set; skipping the assistant call.")
    else:
        checks.append(("Assistant answers an age question", check_assistant_answers))

    print(f"\n[smoke_test] Running {len(checks)} checks\n")
    failures = _run(checks)

    if failures:
        print(f"\n[smoke_test] FAIL: {len(failures)} of {len(checks)} checks failed.", file=sys.stderr)
        sys.exit(1)
    print(f"\n[smoke_test] PASS: {len(checks)} checks passed.")


if __name__ == "__main__":
    main()
