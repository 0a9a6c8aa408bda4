# tripweek/suggest.py
from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Sequence, Union

from .model import Constraint, Event, WeekSuggestion
from .quarters import quarter_by_id
from .scoring import score_week
from .typeconfig import HardStopSource, as_predicate
from .weeks import DateLike, all_mondays_in_quarter, mondays_in_range, time_range_dates

VIABLE_THRESHOLD = -500
MAX_SUGGESTIONS = 3


def rank_candidates(
    candidates: Iterable[dt.date],
    location: str,
    events: Sequence[Event],
    constraints: Sequence[Constraint],
    is_hard_stop: HardStopSource = None,
) -> list[WeekSuggestion]:
    """Score each candidate Monday; keep score > -500; best three first.

    The sort is stable, so equal scores keep candidate order (earliest
    Monday first for the enumerations below).
    """
    pred = as_predicate(is_hard_stop)
    scored: List[WeekSuggestion] = []
    for monday in candidates:
        res = score_week(monday, location, events, constraints, pred)
        if res.score <= VIABLE_THRESHOLD:
            continue
        scored.append(
            WeekSuggestion(
                date=monday,
                iso=monday.isoformat(),
                score=res.score,
                reasons=res.reasons,
                action=res.action,
            )
        )
    scored.sort(key=lambda s: -s.score)
    return scored[:MAX_SUGGESTIONS]


def get_suggestions_for_quarter(
    quarter_id: int,
    year: int,
    location: str,
    events: Sequence[Event],
    constraints: Sequence[Constraint],
    is_hard_stop: HardStopSource = None,
) -> list[WeekSuggestion]:
    """Top (at most 3) viable weeks of a calendar quarter.

    Raises InvalidQuarterError when quarter_id is not 1-4.
    """
    quarter = quarter_by_id(quarter_id)
    candidates = all_mondays_in_quarter(quarter.months, int(year))
    return rank_candidates(candidates, location, events, constraints, is_hard_stop)


def get_suggestions_for_time_range(
    range_id: str,
    reference: Union[int, DateLike],
    location: str,
    events: Sequence[Event],
    constraints: Sequence[Constraint],
    is_hard_stop: HardStopSource = None,
) -> list[WeekSuggestion]:
    """Top (at most 3) viable weeks within a named range (see time_range_dates)."""
    start, end = time_range_dates(range_id, reference)
    return rank_candidates(mondays_in_range(start, end), location, events, constraints, is_hard_stop)
