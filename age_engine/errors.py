"""Exceptions raised by the age engine.

Both error kinds derive from ``ValueError`` so that callers which only
expect the built-in type (the Strands tool runtime, for example) still
handle them.
"""


class AgeError(ValueError):
    """Base class for every failure the engine reports."""


class InvalidDate(AgeError):
    """An input could not be interpreted as a calendar date."""


class InvalidRange(AgeError):
    """The birth date falls after the reference date."""
