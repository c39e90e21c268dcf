"""Strands tools exposing the age engine to the assistant model.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Validation happens inside the engine and
surfaces as ``ValueError`` subclasses, which the Strands runtime reports
back to the model as a tool error rather than a Python traceback.
"""

import datetime
import json
import logging

from strands import tool

from age_engine.engine import calculate
from age_engine.formatting import format_duration
from age_engine.insights import cosmic_metrics

logger: logging.Logger = logging.getLogger(__name__)


@tool
def get_current_date() -> str:
    """Get today's date in YYYY-MM-DD format.

    Use this tool to retrieve the current date when the user does not say
    which date their age should be measured against.

    Returns:
        Today's date as a string in YYYY-MM-DD format.
    """
    today = datetime.date.today().isoformat()
    logger.debug("get_current_date called, returning %s", today)
    return today


@tool
def calculate_age(birth_date: str, reference_date: str | None = None) -> str:
    """Calculate a full age breakdown from a birthdate.

    Use this tool whenever the user asks how old they are, how many days,
    weeks, hours, minutes or seconds they have lived, when their next
    birthday is, or how close they are to a life milestone.

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.
        reference_date: The date to measure the age on, in YYYY-MM-DD
            format.  Omit it to measure against today.

    Returns:
        A JSON object with years, months, days, total_days, total_hours,
        total_minutes, total_seconds, weeks, next_birthday,
        days_until_next_birthday, a milestones list (label, descriptor,
        unit, target, status, eta) and a cosmic block (lunar_cycles,
        heartbeats, sunrises, percent_of_century).

    Raises:
        ValueError: If either date is not a valid YYYY-MM-DD date, or if
            birth_date is after reference_date.
    """
    logger.debug("calculate_age called, reference_date %s", "given" if reference_date else "omitted")
    snapshot = calculate(birth_date, reference_date or None)
    payload = snapshot.model_dump(mode="json")
    payload["cosmic"] = cosmic_metrics(snapshot).model_dump(mode="json")
    return json.dumps(payload)


@tool
def format_duration_days(days: float) -> str:
    """Turn a number of days into a short duration such as "2 yr • 3 mo • 10 d".

    Use this tool to present a milestone ETA or a birthday countdown to the
    user in years, months and days.

    Args:
        days: A non-negative number of days.

    Returns:
        The formatted duration, or "Now" when it rounds to zero.

    Raises:
        ValueError: If days is negative.
    """
    if days < 0:
        raise ValueError("days must not be negative.")
    return format_duration(days)
