# tripweek/weeks.py
"""Work-week arithmetic on timezone-free calendar dates.

A week is identified by its Monday and always spans Monday..Friday
inclusive. Saturday and Sunday never take part in overlap tests.

All functions accept either `datetime.date` values or ISO `YYYY-MM-DD`
strings. Strings are split into components explicitly, so no timezone or
locale can shift the calendar day.
"""

from __future__ import annotations

import calendar
import datetime as dt
import re
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

DateLike = Union[dt.date, str]

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

WORK_WEEK_DAYS = 5


def parse_iso_date(s: str) -> dt.date:
    """Parse `YYYY-MM-DD` as a local calendar date.

    Raises ValueError for anything else (including impossible dates).
    """
    m = _ISO_DATE_RE.match(str(s).strip())
    if not m:
        raise ValueError(f"Invalid ISO date: {s!r}")
    y, mo, d = (int(x) for x in m.groups())
    return dt.date(y, mo, d)


def as_date(d: DateLike) -> dt.date:
    if isinstance(d, dt.datetime):
        return d.date()
    if isinstance(d, dt.date):
        return d
    if isinstance(d, str):
        return parse_iso_date(d)
    raise TypeError(f"Expected date or ISO date string; got {type(d).__name__}")


def to_iso(d: DateLike) -> str:
    return as_date(d).isoformat()


def monday_of(d: DateLike) -> dt.date:
    """Monday of the week containing `d` (a Sunday maps 6 days back)."""
    day = as_date(d)
    return day - dt.timedelta(days=day.weekday())


def friday_of(d: DateLike) -> dt.date:
    return monday_of(d) + dt.timedelta(days=WORK_WEEK_DAYS - 1)


def ranges_overlap(a_start: DateLike, a_end: DateLike, b_start: DateLike, b_end: DateLike) -> bool:
    """Inclusive day-granular overlap of [a_start, a_end] and [b_start, b_end]."""
    return as_date(a_start) <= as_date(b_end) and as_date(a_end) >= as_date(b_start)


def overlaps_week(range_start: DateLike, range_end: DateLike, week_anchor: DateLike) -> bool:
    """True iff [range_start, range_end] touches the Mon-Fri week of `week_anchor`."""
    return ranges_overlap(range_start, range_end, monday_of(week_anchor), friday_of(week_anchor))


def mondays_in_month(year: int, month: int) -> List[dt.date]:
    """Every Monday of `month` (1-12) in `year`, in date order."""
    first = dt.date(int(year), int(month), 1)
    cur = first + dt.timedelta(days=(7 - first.weekday()) % 7)
    out: List[dt.date] = []
    while cur.month == first.month:
        out.append(cur)
        cur += dt.timedelta(days=7)
    return out


def all_mondays_in_quarter(quarter_months: Iterable[int], year: int) -> List[dt.date]:
    """Mondays falling inside the listed calendar months (1-12) of `year`.

    Months are enumerated in the order given; quarters list them ascending,
    which yields increasing date order.
    """
    out: List[dt.date] = []
    for month in quarter_months:
        out.extend(mondays_in_month(year, month))
    return out


def mondays_in_range(start: DateLike, end: DateLike) -> List[dt.date]:
    """Every Monday m with start <= m <= end."""
    start_d = as_date(start)
    end_d = as_date(end)
    cur = monday_of(start_d)
    if cur < start_d:
        cur += dt.timedelta(days=7)
    out: List[dt.date] = []
    while cur <= end_d:
        out.append(cur)
        cur += dt.timedelta(days=7)
    return out


def weeks_in_year(year: int) -> List[Dict[str, Any]]:
    """Week rows for a calendar year.

    Starts at the Monday of the week holding January 1 (which may fall in
    the previous December) and ends with the last Monday on or before
    December 31. Each row: {"date": date, "iso": str, "month": int}.
    """
    end = dt.date(int(year), 12, 31)
    cur = monday_of(dt.date(int(year), 1, 1))
    out: List[Dict[str, Any]] = []
    while cur <= end:
        out.append({"date": cur, "iso": cur.isoformat(), "month": cur.month})
        cur += dt.timedelta(days=7)
    return out


def week_number(d: DateLike, year: int) -> int:
    """1-based week index of `d`, counting from the week holding January 1."""
    start = monday_of(dt.date(int(year), 1, 1))
    return (monday_of(d) - start).days // 7 + 1


def is_same_week(a: DateLike, b: DateLike) -> bool:
    return monday_of(a) == monday_of(b)


def current_quarter(reference: Optional[DateLike] = None) -> int:
    """Quarter (1-4) of `reference`, or of today when omitted."""
    d = as_date(reference) if reference is not None else dt.date.today()
    return (d.month - 1) // 3 + 1


def _add_months(d: dt.date, months: int) -> dt.date:
    # Day-of-month is clamped to the target month's length (Jan 31 + 1 -> Feb 28/29).
    idx = d.month - 1 + int(months)
    y = d.year + idx // 12
    m = idx % 12 + 1
    last = calendar.monthrange(y, m)[1]
    return dt.date(y, m, min(d.day, last))


def time_range_dates(range_id: str, reference: Union[int, DateLike]) -> Tuple[dt.date, dt.date]:
    """(start, end) for a named planning range.

    `reference` is a year or a date. A bare year anchors the relative ranges
    on January 1 of that year. Unknown ids fall back to "current-year".
    """
    if isinstance(reference, int) and not isinstance(reference, bool):
        ref = dt.date(reference, 1, 1)
    else:
        ref = as_date(reference)  # type: ignore[arg-type]
    year = ref.year

    if range_id == "current-quarter":
        q = current_quarter(ref)
        first_month = (q - 1) * 3 + 1
        start = dt.date(year, first_month, 1)
        end = _add_months(start, 3) - dt.timedelta(days=1)
        return start, end
    if range_id == "next-3-months":
        return ref, _add_months(ref, 3)
    if range_id == "next-6-months":
        return ref, _add_months(ref, 6)
    if range_id == "next-12-months":
        return ref, _add_months(ref, 12)

    return dt.date(year, 1, 1), dt.date(year, 12, 31)
