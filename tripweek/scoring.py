# tripweek/scoring.py
"""Desirability score for travelling to one location in one work week.

  base                              +100
  hard-stop constraint in the week  score := -1000 (per hit)
  soft constraint in the week       -20
  trip to a matching location       +500, action "consolidate"
  trip to another location          -1000
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .model import ACTION_CONSOLIDATE, ACTION_SCHEDULE, Constraint, Event, ScoreResult
from .typeconfig import HardStopSource, as_predicate
from .weeks import DateLike, monday_of, overlaps_week

BASE_SCORE = 100
HARD_STOP_SCORE = -1000
SOFT_PENALTY = 20
CONSOLIDATION_BONUS = 500
LOCATION_CONFLICT_PENALTY = 1000


def locations_match(a: Optional[str], b: Optional[str]) -> bool:
    """Case-insensitive substring match in either direction."""
    l1 = (a or "").lower().strip()
    l2 = (b or "").lower().strip()
    return l1 in l2 or l2 in l1


def _event_in_week(event: Event, monday_iso: str, monday: DateLike) -> bool:
    # Flexible trips are keyed by their Monday; fixed trips by Mon-Fri overlap.
    if not event.end_date:
        return event.start_date == monday_iso
    return overlaps_week(event.start_date, event.end_date, monday)


def score_week(
    week_anchor: DateLike,
    desired_location: str,
    events: Sequence[Event],
    constraints: Sequence[Constraint],
    is_hard_stop: HardStopSource = None,
) -> ScoreResult:
    """Score the Mon-Fri week containing `week_anchor`.

    Constraints are applied in the order given, then events. A hard hit
    sets the running score to -1000 rather than clamping it, so a soft hit
    after a hard one still subtracts (-1020), while a soft hit before it is
    overwritten.
    """
    pred = as_predicate(is_hard_stop)
    monday = monday_of(week_anchor)
    monday_iso = monday.isoformat()

    score = BASE_SCORE
    reasons: List[str] = []
    action = ACTION_SCHEDULE

    for c in constraints:
        if not overlaps_week(c.start_date, c.end_date or c.start_date, monday):
            continue
        if pred(c.type):
            score = HARD_STOP_SCORE
            reasons.append(f"Blocked: {c.title}")
        else:
            score -= SOFT_PENALTY
            reasons.append(f"Preference: {c.title}")

    for e in events:
        if not _event_in_week(e, monday_iso, monday):
            continue
        if locations_match(desired_location, e.location):
            score += CONSOLIDATION_BONUS
            reasons.append(f"Existing trip to {e.location} ({e.title}). Consolidate here!")
            action = ACTION_CONSOLIDATE
        else:
            score -= LOCATION_CONFLICT_PENALTY
            reasons.append(f"Already in {e.location}")

    return ScoreResult(score=score, reasons=tuple(reasons), action=action)
