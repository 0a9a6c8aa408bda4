# tripweek/quarters.py
"""Calendar quarters and named planning ranges.

Standard calendar year, Jan 1 - Dec 31. Months are 1-based.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidQuarterError


@dataclass(frozen=True)
class Quarter:
    id: int
    name: str
    months: Tuple[int, int, int]
    label: str


QUARTERS: Tuple[Quarter, ...] = (
    Quarter(id=1, name="Q1", months=(1, 2, 3), label="Jan - Mar"),
    Quarter(id=2, name="Q2", months=(4, 5, 6), label="Apr - Jun"),
    Quarter(id=3, name="Q3", months=(7, 8, 9), label="Jul - Sep"),
    Quarter(id=4, name="Q4", months=(10, 11, 12), label="Oct - Dec"),
)

TIME_RANGES: Tuple[str, ...] = (
    "current-year",
    "current-quarter",
    "next-3-months",
    "next-6-months",
    "next-12-months",
)


def quarter_by_id(quarter_id: int) -> Quarter:
    for q in QUARTERS:
        # bool is an int; True must not resolve to Q1
        if not isinstance(quarter_id, bool) and q.id == quarter_id:
            return q
    raise InvalidQuarterError(f"Invalid quarter ID: {quarter_id}")


def quarter_for_month(month: int) -> Optional[Quarter]:
    for q in QUARTERS:
        if month in q.months:
            return q
    return None
