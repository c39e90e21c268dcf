"""age_engine: elapsed-time statistics from a birth date.

Public API
----------
calculate
    Build an ``AgeSnapshot`` from a birth date and an optional reference date.
AgeEngine
    The engine class behind ``calculate``, with an injectable clock.
create_agent
    Factory that builds a ``strands.Agent`` exposing the engine as tools.

Example
-------
>>> from age_engine import calculate
>>> snapshot = calculate("2000-01-01", "2000-01-01")
>>> snapshot.next_birthday.isoformat(), snapshot.days_until_next_birthday
('2001-01-01', 366)
"""

from age_engine.agent import create_agent
from age_engine.engine import AgeEngine, calculate
from age_engine.errors import AgeError, InvalidDate, InvalidRange
from age_engine.models import AgeSnapshot, Milestone, MilestoneStatus, MilestoneUnit

__all__: list[str] = [
    "AgeEngine",
    "AgeError",
    "AgeSnapshot",
    "InvalidDate",
    "InvalidRange",
    "Milestone",
    "MilestoneStatus",
    "MilestoneUnit",
    "calculate",
    "create_agent",
]
