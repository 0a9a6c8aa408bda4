"""Exception types raised by the tripweek library."""

from __future__ import annotations


class TripweekError(Exception):
    """Base class for tripweek errors."""


class InvalidQuarterError(TripweekError, ValueError):
    """Raised when a quarter id is not one of 1, 2, 3, 4."""


class RecordError(TripweekError, ValueError):
    """Raised when an event or constraint record cannot be built."""
