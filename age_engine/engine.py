"""The age engine: two calendar dates in, one immutable snapshot out.

Usage::

    from age_engine import calculate

    snapshot = calculate("1990-05-20", "2024-05-19")
    print(snapshot.years, snapshot.days_until_next_birthday)

The engine holds no state besides its clock, which is only consulted when
the reference date is omitted.  Callers re-invoke ``calculate`` whenever an
input changes; nothing is cached between calls.
"""

import datetime
import logging
from typing import Callable

from age_engine.calendar_math import (
    calendar_difference,
    elapsed_totals,
    next_birthday,
    parse_calendar_date,
)
from age_engine.errors import InvalidRange
from age_engine.milestones import MILESTONE_CATALOG, evaluate_milestones
from age_engine.models import AgeSnapshot, MilestoneDefinition

logger: logging.Logger = logging.getLogger(__name__)

DateInput = datetime.date | str


class AgeEngine:
    """Computes ``AgeSnapshot`` values.

    Args:
        today: Zero-argument callable returning the local current date.
            Used only when ``calculate`` is called without a reference date.
        catalog: Milestone definitions to evaluate, in display order.
    """

    def __init__(
        self,
        today: Callable[[], datetime.date] = datetime.date.today,
        catalog: tuple[MilestoneDefinition, ...] = MILESTONE_CATALOG,
    ) -> None:
        self._today = today
        self._catalog = catalog

    def calculate(
        self,
        birth_date: DateInput,
        reference_date: DateInput | None = None,
    ) -> AgeSnapshot:
        """Build the age snapshot of ``birth_date`` as seen on ``reference_date``.

        Args:
            birth_date: A ``date`` or a ``YYYY-MM-DD`` string.
            reference_date: Same types; defaults to today.

        Returns:
            The fully derived ``AgeSnapshot``.

        Raises:
            InvalidDate: If either input is not a valid calendar date, or the
                next birthday would fall after year 9999.
            InvalidRange: If ``birth_date`` is after ``reference_date``.
        """
        birth = parse_calendar_date(birth_date, "birth_date")
        if reference_date is None:
            reference = self._today()
        else:
            reference = parse_calendar_date(reference_date, "reference_date")

        if birth > reference:
            raise InvalidRange(
                f"birth_date {birth.isoformat()} must not be after "
                f"reference_date {reference.isoformat()}."
            )

        upcoming = next_birthday(birth, reference)

        years, months, days = calendar_difference(birth, reference)
        totals = elapsed_totals(birth, reference)

        snapshot = AgeSnapshot(
            birth_date=birth,
            reference_date=reference,
            years=years,
            months=months,
            days=days,
            total_days=totals.total_days,
            total_hours=totals.total_hours,
            total_minutes=totals.total_minutes,
            total_seconds=totals.total_seconds,
            weeks=totals.weeks,
            next_birthday=upcoming,
            days_until_next_birthday=(upcoming - reference).days,
            milestones=evaluate_milestones(totals, self._catalog),
        )
        logger.debug(
            "Calculated snapshot: %d total days, next birthday in %d days",
            snapshot.total_days,
            snapshot.days_until_next_birthday,
        )
        return snapshot


_default_engine = AgeEngine()


def calculate(
    birth_date: DateInput,
    reference_date: DateInput | None = None,
) -> AgeSnapshot:
    """Shortcut for ``AgeEngine().calculate`` using the system clock."""
    return _default_engine.calculate(birth_date, reference_date)
