# tripweek/consolidate.py
from __future__ import annotations

from typing import Dict, List, Sequence

from .model import ConsolidationOpportunity, Event
from .scoring import locations_match


def group_by_start(events: Sequence[Event]) -> Dict[str, List[Event]]:
    """Group events by their raw start_date string, keeping first-seen order."""
    groups: Dict[str, List[Event]] = {}
    for e in events:
        groups.setdefault(e.start_date, []).append(e)
    return groups


def find_consolidation_opportunities(events: Sequence[Event]) -> list[ConsolidationOpportunity]:
    """Same-week, same-location event pairs.

    The week key is the raw start_date (no Monday normalisation), so a fixed
    trip starting mid-week is not grouped with flexible trips of that week.
    Every matching pair in a group is reported.
    """
    out: List[ConsolidationOpportunity] = []
    for week, arr in group_by_start(events).items():
        if len(arr) < 2:
            continue
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                a, b = arr[i], arr[j]
                if locations_match(a.location, b.location):
                    out.append(ConsolidationOpportunity(week=week, events=(a, b), location=a.location))
    return out
