"""Fixed milestone catalog and its evaluation.

The catalog is plain data.  Each entry's ``unit`` selects the comparison
value through ``_UNIT_VALUES``; adding a milestone never needs new code
unless it introduces a new unit.
"""

import logging
import math
from typing import Callable

from age_engine.models import (
    ElapsedTotals,
    Milestone,
    MilestoneDefinition,
    MilestoneStatus,
    MilestoneUnit,
)

logger: logging.Logger = logging.getLogger(__name__)

DAYS_PER_YEAR: float = 365.25

# 80 beats per minute over a day.
HEARTBEATS_PER_DAY: int = 80 * 60 * 24

MILESTONE_CATALOG: tuple[MilestoneDefinition, ...] = (
    MilestoneDefinition(
        label="10,000 days on Earth",
        descriptor="Celebrate a quintuple-digit day count.",
        unit=MilestoneUnit.DAYS,
        target=10_000,
    ),
    MilestoneDefinition(
        label="1,000 weeks milestone",
        descriptor="A millennium of weeks lived.",
        unit=MilestoneUnit.WEEKS,
        target=1_000,
    ),
    MilestoneDefinition(
        label="Half-century marker",
        descriptor="The golden jubilee of life experience.",
        unit=MilestoneUnit.YEARS,
        target=50,
    ),
    MilestoneDefinition(
        label="One billion heartbeats (estimated)",
        descriptor="Approximate based on 80 bpm average.",
        unit=MilestoneUnit.DAYS,
        target=1_000_000_000 / HEARTBEATS_PER_DAY,
    ),
    MilestoneDefinition(
        label="One gigasecond old",
        descriptor="A billion seconds of stories.",
        unit=MilestoneUnit.SECONDS,
        target=1_000_000_000,
    ),
    MilestoneDefinition(
        label="20 million minutes",
        descriptor="Minutes that shaped your narrative.",
        unit=MilestoneUnit.MINUTES,
        target=20_000_000,
    ),
)

_UNIT_VALUES: dict[MilestoneUnit, Callable[[ElapsedTotals], float]] = {
    MilestoneUnit.DAYS: lambda totals: totals.total_days,
    MilestoneUnit.WEEKS: lambda totals: totals.weeks,
    MilestoneUnit.YEARS: lambda totals: totals.total_days / DAYS_PER_YEAR,
    MilestoneUnit.MINUTES: lambda totals: totals.total_minutes,
    MilestoneUnit.SECONDS: lambda totals: totals.total_seconds,
}


def unit_value(unit: MilestoneUnit, totals: ElapsedTotals) -> float:
    """Current progress expressed in ``unit``.

    Years are fractional (``total_days / 365.25``); every other unit is a
    whole count taken from the totals.
    """
    return _UNIT_VALUES[unit](totals)


def evaluate_milestone(definition: MilestoneDefinition, totals: ElapsedTotals) -> Milestone:
    value = unit_value(definition.unit, totals)

    if value >= definition.target:
        return Milestone(
            **definition.model_dump(),
            status=MilestoneStatus.REACHED,
        )

    remaining = definition.target - value
    if definition.unit is MilestoneUnit.YEARS:
        # Year ETAs are reported as whole days.
        remaining = math.ceil(remaining * DAYS_PER_YEAR)

    return Milestone(
        **definition.model_dump(),
        status=MilestoneStatus.UPCOMING,
        eta=max(remaining, 0),
    )


def evaluate_milestones(
    totals: ElapsedTotals,
    catalog: tuple[MilestoneDefinition, ...] = MILESTONE_CATALOG,
) -> tuple[Milestone, ...]:
    """Evaluate every catalog entry, preserving catalog order."""
    milestones = tuple(evaluate_milestone(definition, totals) for definition in catalog)
    logger.debug(
        "Evaluated %d milestones, %d reached",
        len(milestones),
        sum(1 for m in milestones if m.status is MilestoneStatus.REACHED),
    )
    return milestones
