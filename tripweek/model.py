# tripweek/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .weeks import to_iso

ACTION_SCHEDULE = "schedule"
ACTION_CONSOLIDATE = "consolidate"

KIND_HARD_CONSTRAINT = "hard-constraint"
KIND_DOUBLE_BOOKING = "double-booking"


def _iso_or_none(v: Any) -> Optional[str]:
    if v is None or v == "":
        return None
    if isinstance(v, dt.date):
        return to_iso(v)
    return str(v)


@dataclass(frozen=True)
class Event:
    """A trip.

    Flexible trips (is_fixed false, or no end_date) carry the Monday of
    their week in start_date and stand for that Mon-Fri week.
    """

    id: str
    title: str
    type: str
    location: str
    start_date: str
    end_date: Optional[str] = None
    duration: int = 1
    is_fixed: bool = True
    archived: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", _iso_or_none(self.start_date))
        object.__setattr__(self, "end_date", _iso_or_none(self.end_date))

    @property
    def is_flexible(self) -> bool:
        return not self.is_fixed or not self.end_date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "duration": self.duration,
            "isFixed": self.is_fixed,
            "archived": self.archived,
        }


@dataclass(frozen=True)
class Constraint:
    """Inclusive day range during which travel is blocked or discouraged."""

    id: str
    title: str
    type: str
    start_date: str
    end_date: Optional[str] = None

    def __post_init__(self) -> None:
        start = _iso_or_none(self.start_date)
        object.__setattr__(self, "start_date", start)
        object.__setattr__(self, "end_date", _iso_or_none(self.end_date) or start)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }


@dataclass(frozen=True)
class ScoreResult:
    score: int
    reasons: Tuple[str, ...]
    action: str = ACTION_SCHEDULE

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "reasons": list(self.reasons), "action": self.action}


@dataclass(frozen=True)
class WeekSuggestion:
    date: dt.date
    iso: str
    score: int
    reasons: Tuple[str, ...]
    action: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "iso": self.iso,
            "score": self.score,
            "reasons": list(self.reasons),
            "action": self.action,
        }


@dataclass(frozen=True)
class HardConstraintConflict:
    event: Event
    constraint: Constraint
    message: str
    kind: str = KIND_HARD_CONSTRAINT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "event": self.event.to_dict(),
            "constraint": self.constraint.to_dict(),
            "message": self.message,
        }


@dataclass(frozen=True)
class DoubleBooking:
    event1: Event
    event2: Event
    message: str
    kind: str = KIND_DOUBLE_BOOKING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "event1": self.event1.to_dict(),
            "event2": self.event2.to_dict(),
            "message": self.message,
        }


Conflict = Union[HardConstraintConflict, DoubleBooking]


@dataclass(frozen=True)
class ConsolidationOpportunity:
    week: str
    events: Tuple[Event, Event]
    location: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "week": self.week,
            "events": [e.to_dict() for e in self.events],
            "location": self.location,
        }


@dataclass(frozen=True)
class TravelMetrics:
    weeks_traveling: int
    weeks_home: int
    conflicts: int
    conflict_details: Tuple[Conflict, ...]
    travel_weeks: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weeksTraveling": self.weeks_traveling,
            "weeksHome": self.weeks_home,
            "conflicts": self.conflicts,
            "conflictDetails": [c.to_dict() for c in self.conflict_details],
            "travelWeeks": list(self.travel_weeks),
        }


__all__ = [
    "ACTION_CONSOLIDATE",
    "ACTION_SCHEDULE",
    "KIND_DOUBLE_BOOKING",
    "KIND_HARD_CONSTRAINT",
    "Conflict",
    "ConsolidationOpportunity",
    "Constraint",
    "DoubleBooking",
    "Event",
    "HardConstraintConflict",
    "ScoreResult",
    "TravelMetrics",
    "WeekSuggestion",
]
