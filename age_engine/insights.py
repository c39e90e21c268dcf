"""Derived figures layered on a snapshot: lunar cycles, heartbeats and friends."""

import math

from age_engine.milestones import DAYS_PER_YEAR
from age_engine.models import AgeSnapshot, CosmicMetrics

SYNODIC_MONTH_DAYS: float = 29.53
AVERAGE_BPM: int = 80


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return math.floor(value + 0.5)


def cosmic_metrics(snapshot: AgeSnapshot) -> CosmicMetrics:
    return CosmicMetrics(
        lunar_cycles=round_half_up(snapshot.total_days / SYNODIC_MONTH_DAYS),
        heartbeats=snapshot.total_minutes * AVERAGE_BPM,
        sunrises=snapshot.total_days,
        percent_of_century=snapshot.total_days / (100 * DAYS_PER_YEAR) * 100,
    )
