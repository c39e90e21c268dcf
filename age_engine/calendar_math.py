"""Calendar arithmetic for the age engine.

All functions work on plain ``datetime.date`` values in the proleptic
Gregorian calendar.  Inputs carry no time of day, so every date is taken to
start at midnight and no timezone reconciliation happens.
"""

import calendar
import datetime
import logging
import re

from age_engine.errors import InvalidDate
from age_engine.models import ElapsedTotals

logger: logging.Logger = logging.getLogger(__name__)

_MAX_DATE_LEN = 10
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_ONE_SECOND = datetime.timedelta(seconds=1)


def parse_calendar_date(value: object, name: str) -> datetime.date:
    """Normalise ``value`` to a ``datetime.date``.

    Accepts ``date`` instances (``datetime`` values are truncated to their
    date) and strict ``YYYY-MM-DD`` strings.

    Args:
        value: The raw input.
        name: Argument name used in error messages.

    Raises:
        InvalidDate: If ``value`` does not name a real calendar date.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        raise InvalidDate(f"{name} must be a date or a YYYY-MM-DD string.")

    text = value.strip()
    if len(text) > _MAX_DATE_LEN:
        raise InvalidDate(f"{name} exceeds maximum length of {_MAX_DATE_LEN}.")

    logger.debug("Parsing %d-char %s", len(text), name)

    if not _ISO_DATE_RE.fullmatch(text):
        raise InvalidDate(f"{name} is not a valid ISO date (YYYY-MM-DD).")
    try:
        return datetime.date.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDate(f"{name} is not a valid ISO date (YYYY-MM-DD).") from exc


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def days_in_previous_month(day: datetime.date) -> int:
    """Length of the calendar month immediately before ``day``'s month."""
    if day.month == 1:
        return 31
    return days_in_month(day.year, day.month - 1)


def calendar_difference(birth: datetime.date, reference: datetime.date) -> tuple[int, int, int]:
    """Split the interval into whole years, months and remaining days.

    A negative day count borrows the real length of the month before the
    reference month; a negative month count borrows twelve months.

    When the birth day does not exist in the borrowed month (Jan 31 against
    Mar 1), borrowing still leaves the days negative.  The monthly
    anniversary is then clamped to that month's last day, so ``days`` is the
    day of the reference month and stays below the borrowed month's length.
    """
    years = reference.year - birth.year
    months = reference.month - birth.month
    days = reference.day - birth.day

    if days < 0:
        months -= 1
        days += days_in_previous_month(reference)
        if days < 0:
            days = reference.day

    if months < 0:
        years -= 1
        months += 12

    return years, months, days


def elapsed_totals(birth: datetime.date, reference: datetime.date) -> ElapsedTotals:
    """Whole units elapsed between the two dates.

    Each unit is floored from the one below it so the chain stays
    consistent: seconds -> minutes -> hours -> days -> weeks.
    """
    total_seconds = (reference - birth) // _ONE_SECOND
    total_minutes = total_seconds // 60
    total_hours = total_minutes // 60
    total_days = total_hours // 24
    return ElapsedTotals(
        total_seconds=total_seconds,
        total_minutes=total_minutes,
        total_hours=total_hours,
        total_days=total_days,
        weeks=total_days // 7,
    )


def birthday_in_year(birth: datetime.date, year: int) -> datetime.date:
    """The anniversary of ``birth`` in ``year``.

    Feb 29 births are celebrated on Feb 28 in non-leap years.
    """
    if birth.month == 2 and birth.day == 29 and not is_leap_year(year):
        return datetime.date(year, 2, 28)
    return datetime.date(year, birth.month, birth.day)


def next_birthday(birth: datetime.date, reference: datetime.date) -> datetime.date:
    """First anniversary strictly after ``reference``.

    An anniversary that falls on the reference date itself counts as
    already celebrated.

    Raises:
        InvalidDate: If that anniversary would fall after year 9999.
    """
    candidate = birthday_in_year(birth, reference.year)
    if candidate <= reference:
        if reference.year == datetime.MAXYEAR:
            raise InvalidDate(
                f"reference_date {reference.isoformat()} has no next birthday "
                f"before year {datetime.MAXYEAR + 1}."
            )
        candidate = birthday_in_year(birth, reference.year + 1)
    return candidate
