# tripweek/conflicts.py
from __future__ import annotations

import datetime as dt
from typing import List, Sequence, Set, Tuple

from .model import Conflict, Constraint, DoubleBooking, Event, HardConstraintConflict
from .typeconfig import HardStopSource, as_predicate
from .weeks import as_date, friday_of, ranges_overlap


def event_day_span(event: Event) -> Tuple[dt.date, dt.date]:
    """Inclusive calendar days an event occupies.

    Fixed trips use their own dates. Flexible trips span Monday..Friday of
    the week in start_date.
    """
    start = as_date(event.start_date)
    if event.is_flexible:
        return start, friday_of(start)
    return start, as_date(event.end_date)  # type: ignore[arg-type]


def constraint_day_span(constraint: Constraint) -> Tuple[dt.date, dt.date]:
    return as_date(constraint.start_date), as_date(constraint.end_date or constraint.start_date)


def _pair_key(a: Event, b: Event) -> Tuple[str, str]:
    return (a.id, b.id) if a.id <= b.id else (b.id, a.id)


def detect_conflicts(
    events: Sequence[Event],
    constraints: Sequence[Constraint],
    is_hard_stop: HardStopSource = None,
) -> list[Conflict]:
    """Hard-constraint violations and double-bookings (day-granular).

    For each event, its hard-constraint conflicts are emitted before any
    double-booking it takes part in. Each unordered event pair is reported
    at most once. Soft constraints never produce conflicts.
    """
    pred = as_predicate(is_hard_stop)
    hard = [(c, constraint_day_span(c)) for c in constraints if pred(c.type)]
    spans = [(e, event_day_span(e)) for e in events]

    conflicts: List[Conflict] = []
    reported: Set[Tuple[str, str]] = set()

    for event, (ev_start, ev_end) in spans:
        for constraint, (c_start, c_end) in hard:
            if ranges_overlap(ev_start, ev_end, c_start, c_end):
                conflicts.append(
                    HardConstraintConflict(
                        event=event,
                        constraint=constraint,
                        message=f'Event "{event.title}" conflicts with {constraint.title}',
                    )
                )

        for other, (o_start, o_end) in spans:
            if other.id == event.id:
                continue
            if not ranges_overlap(ev_start, ev_end, o_start, o_end):
                continue
            key = _pair_key(event, other)
            if key in reported:
                continue
            reported.add(key)
            conflicts.append(
                DoubleBooking(
                    event1=event,
                    event2=other,
                    message=f'Double-booked: "{event.title}" and "{other.title}"',
                )
            )

    return conflicts
