"""Immutable value types produced by the age engine.

Every model is frozen: a snapshot is built once per ``calculate`` call and
never mutated afterwards.  ``model_dump(mode="json")`` gives the
serialisable form handed to the assistant tools.
"""

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MilestoneUnit(str, Enum):
    DAYS = "days"
    WEEKS = "weeks"
    YEARS = "years"
    MINUTES = "minutes"
    SECONDS = "seconds"


class MilestoneStatus(str, Enum):
    REACHED = "reached"
    UPCOMING = "upcoming"


class MilestoneDefinition(BaseModel):
    """One row of the fixed milestone catalog."""

    model_config = ConfigDict(frozen=True)

    label: str
    descriptor: str
    unit: MilestoneUnit
    target: float = Field(..., gt=0)


class Milestone(BaseModel):
    """A catalog entry evaluated against one person's elapsed totals."""

    model_config = ConfigDict(frozen=True)

    label: str
    descriptor: str
    unit: MilestoneUnit
    target: float
    status: MilestoneStatus
    eta: float | None = Field(
        default=None,
        ge=0,
        description="Remaining amount in ``unit``; whole days for ``years``. Only set when upcoming.",
    )


class ElapsedTotals(BaseModel):
    """Floor-truncated counts of whole units elapsed since birth."""

    model_config = ConfigDict(frozen=True)

    total_seconds: int = Field(..., ge=0)
    total_minutes: int = Field(..., ge=0)
    total_hours: int = Field(..., ge=0)
    total_days: int = Field(..., ge=0)
    weeks: int = Field(..., ge=0)


class AgeSnapshot(BaseModel):
    """Complete result of one ``calculate`` call."""

    model_config = ConfigDict(frozen=True)

    birth_date: datetime.date
    reference_date: datetime.date

    years: int = Field(..., ge=0)
    months: int = Field(..., ge=0, le=11)
    days: int = Field(..., ge=0, le=30)

    total_days: int = Field(..., ge=0)
    total_hours: int = Field(..., ge=0)
    total_minutes: int = Field(..., ge=0)
    total_seconds: int = Field(..., ge=0)
    weeks: int = Field(..., ge=0)

    next_birthday: datetime.date
    days_until_next_birthday: int = Field(..., ge=0)

    milestones: tuple[Milestone, ...]


class CosmicMetrics(BaseModel):
    """Playful derived figures shown alongside the core snapshot."""

    model_config = ConfigDict(frozen=True)

    lunar_cycles: int
    heartbeats: int
    sunrises: int
    percent_of_century: float
