# tripweek/metrics.py
from __future__ import annotations

import datetime as dt
from typing import List, Sequence, Set

from .conflicts import detect_conflicts
from .model import Constraint, Event, TravelMetrics
from .typeconfig import HardStopSource
from .weeks import as_date, friday_of, monday_of

WEEKS_PER_YEAR = 52


def travel_weeks(events: Sequence[Event]) -> list[str]:
    """Sorted ISO Mondays of every Mon-Fri week touched by an event."""
    weeks: Set[str] = set()
    for e in events:
        if e.is_flexible:
            weeks.add(e.start_date)
            continue
        start = as_date(e.start_date)
        end = as_date(e.end_date)  # type: ignore[arg-type]
        cur = monday_of(start)
        last = monday_of(end)
        while cur <= last:
            if friday_of(cur) >= start and cur <= end:
                weeks.add(cur.isoformat())
            cur += dt.timedelta(days=7)
    out: List[str] = sorted(weeks)
    return out


def compute_travel_metrics(
    events: Sequence[Event],
    constraints: Sequence[Constraint],
    is_hard_stop: HardStopSource = None,
) -> TravelMetrics:
    """Headline numbers: weeks away (one per event), weeks home, conflicts."""
    conflicts = detect_conflicts(events, constraints, is_hard_stop)
    weeks_traveling = len(events)
    return TravelMetrics(
        weeks_traveling=weeks_traveling,
        weeks_home=WEEKS_PER_YEAR - weeks_traveling,
        conflicts=len(conflicts),
        conflict_details=tuple(conflicts),
        travel_weeks=tuple(travel_weeks(events)),
    )
