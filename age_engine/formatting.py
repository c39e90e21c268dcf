"""Human-readable rendering of age snapshots.

Nothing here feeds back into the engine; these helpers sit on top of an
``AgeSnapshot`` for the CLI and the assistant tools.  Month and weekday
names are always English, independent of the process locale.
"""

import datetime
import math
from typing import Callable

from age_engine.insights import cosmic_metrics, round_half_up
from age_engine.milestones import DAYS_PER_YEAR
from age_engine.models import AgeSnapshot, Milestone, MilestoneStatus, MilestoneUnit

DAYS_PER_MONTH: float = 30.4375

_MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

_SEGMENT_SEPARATOR = " • "

# Milestone ETAs converted to days before formatting.
_ETA_TO_DAYS: dict[MilestoneUnit, Callable[[float], float]] = {
    MilestoneUnit.DAYS: lambda eta: eta,
    MilestoneUnit.YEARS: lambda eta: eta,
    MilestoneUnit.WEEKS: lambda eta: eta * 7,
    MilestoneUnit.MINUTES: lambda eta: eta / (24 * 60),
    MilestoneUnit.SECONDS: lambda eta: eta / (24 * 60 * 60),
}


def format_number(value: float) -> str:
    """Group thousands with commas; integral values lose their decimals."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_duration(days: float) -> str:
    """Render a day count as ``"2 yr • 3 mo • 10 d"``.

    Years use a 365.25-day approximation and months 30.4375 days; the
    remaining days are rounded.  Zero segments are dropped and an all-zero
    duration reads ``"Now"``.
    """
    years = math.floor(days / DAYS_PER_YEAR)
    after_years = days - years * DAYS_PER_YEAR
    months = math.floor(after_years / DAYS_PER_MONTH)
    remaining_days = round_half_up(after_years - months * DAYS_PER_MONTH)

    segments = []
    if years > 0:
        segments.append(f"{years} yr")
    if months > 0:
        segments.append(f"{months} mo")
    if remaining_days > 0:
        segments.append(f"{remaining_days} d")

    return _SEGMENT_SEPARATOR.join(segments) if segments else "Now"


def format_long_date(day: datetime.date) -> str:
    return f"{_MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def format_weekday(day: datetime.date) -> str:
    return _WEEKDAY_NAMES[day.weekday()]


def format_breakdown(snapshot: AgeSnapshot) -> str:
    return _SEGMENT_SEPARATOR.join(
        [
            f"{snapshot.years} years",
            f"{snapshot.months} months",
            f"{snapshot.days} days",
        ]
    )


def eta_in_days(milestone: Milestone) -> float:
    """Milestone ETA converted to days (``0`` when already reached)."""
    if milestone.eta is None:
        return 0
    return _ETA_TO_DAYS[milestone.unit](milestone.eta)


def format_milestone_status(milestone: Milestone) -> str:
    if milestone.status is MilestoneStatus.REACHED:
        return "Achieved"
    return f"ETA {format_duration(eta_in_days(milestone))}"


def render_report(snapshot: AgeSnapshot) -> str:
    """Plain-text report of every snapshot section, for terminal output."""
    cosmic = cosmic_metrics(snapshot)
    lines = [
        f"Age on {format_long_date(snapshot.reference_date)}",
        f"  {format_breakdown(snapshot)}",
        "",
        "Time ledger",
        f"  Total days lived   {format_number(snapshot.total_days)}",
        f"  Total weeks        {format_number(snapshot.weeks)}",
        f"  Total hours        {format_number(snapshot.total_hours)}",
        f"  Total minutes      {format_number(snapshot.total_minutes)}",
        f"  Total seconds      {format_number(snapshot.total_seconds)}",
        "",
        "Next birthday",
        f"  {format_long_date(snapshot.next_birthday)} ({format_weekday(snapshot.next_birthday)})",
        f"  Countdown: {snapshot.days_until_next_birthday} days",
        "",
        "Milestones",
    ]
    for milestone in snapshot.milestones:
        lines.append(f"  {milestone.label}: {format_milestone_status(milestone)}")
        lines.append(f"    {milestone.descriptor}")

    lines += [
        "",
        "Cosmic metrics",
        f"  Lunar cycles lived   {format_number(cosmic.lunar_cycles)}",
        f"  Heartbeats (est.)    {format_number(cosmic.heartbeats)}",
        f"  Sunrises witnessed   {format_number(cosmic.sunrises)}",
        f"  Percent of century   {cosmic.percent_of_century:.2f}%",
    ]
    return "\n".join(lines)
