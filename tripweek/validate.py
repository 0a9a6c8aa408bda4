"""Plan validation helpers (library-facing)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .weeks import parse_iso_date


class PlanValidationError(ValueError):
    """Raised when a plan fails validation."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _nonempty_str(v: Any) -> bool:
    return isinstance(v, str) and bool(v.strip())


def _date_or_err(v: Any, msg: str, errs: List[str]) -> Optional[str]:
    try:
        return parse_iso_date(v).isoformat()
    except (TypeError, ValueError):
        errs.append(msg)
        return None


def _validate_event(ev: Any, *, label: str, errs: List[str]) -> None:
    if not isinstance(ev, dict):
        errs.append(f"{label} must be dict")
        return
    for k in ("title", "location", "type"):
        _require(_nonempty_str(ev.get(k)), f"{label}.{k} must be non-empty string", errs)

    start = _date_or_err(ev.get("startDate"), f"{label}.startDate must be YYYY-MM-DD", errs)
    end = None
    if ev.get("endDate"):
        end = _date_or_err(ev.get("endDate"), f"{label}.endDate must be YYYY-MM-DD", errs)
    if start and end:
        _require(end >= start, f"{label}.endDate is before startDate", errs)

    for k in ("isFixed", "archived"):
        v = ev.get(k)
        if v is not None:
            _require(isinstance(v, bool), f"{label}.{k} must be bool", errs)

    is_fixed = ev.get("isFixed", True)
    if start and (is_fixed is False or not ev.get("endDate")):
        _require(
            parse_iso_date(start).weekday() == 0,
            f"{label}.startDate of a flexible trip must be a Monday",
            errs,
        )

    dur = ev.get("duration", 1)
    _require(
        isinstance(dur, int) and not isinstance(dur, bool) and dur >= 1,
        f"{label}.duration must be an int >= 1",
        errs,
    )


def _validate_constraint(c: Any, *, label: str, errs: List[str]) -> None:
    if not isinstance(c, dict):
        errs.append(f"{label} must be dict")
        return
    for k in ("title", "type"):
        _require(_nonempty_str(c.get(k)), f"{label}.{k} must be non-empty string", errs)
    start = _date_or_err(c.get("startDate"), f"{label}.startDate must be YYYY-MM-DD", errs)
    if c.get("endDate"):
        end = _date_or_err(c.get("endDate"), f"{label}.endDate must be YYYY-MM-DD", errs)
        if start and end:
            _require(end >= start, f"{label}.endDate is before startDate", errs)


def validate_plan(payload: Dict[str, Any], *, label: str = "plan") -> List[str]:
    if not isinstance(payload, dict):
        return [f"{label}: plan must be a dict/object"]

    errs: List[str] = []
    events = payload.get("events", [])
    constraints = payload.get("constraints", [])
    _require(isinstance(events, list), f"{label}: events must be list", errs)
    _require(isinstance(constraints, list), f"{label}: constraints must be list", errs)

    for key in ("eventTypeConfigs", "constraintTypeConfigs"):
        v = payload.get(key)
        if v is not None:
            _require(isinstance(v, dict), f"{label}: {key} must be dict", errs)

    year = payload.get("year")
    if year is not None:
        _require(isinstance(year, int) and not isinstance(year, bool), f"{label}: year must be int", errs)

    if isinstance(events, list):
        seen: Dict[str, int] = {}
        for i, ev in enumerate(events):
            _validate_event(ev, label=f"{label}: events[{i}]", errs=errs)
            if isinstance(ev, dict) and ev.get("id") is not None:
                eid = str(ev.get("id"))
                if eid in seen:
                    errs.append(f"{label}: events[{i}].id duplicates events[{seen[eid]}]: {eid!r}")
                else:
                    seen[eid] = i

    if isinstance(constraints, list):
        for i, c in enumerate(constraints):
            _validate_constraint(c, label=f"{label}: constraints[{i}]", errs=errs)

    return errs


def assert_valid_plan(payload: Dict[str, Any]) -> None:
    errs = validate_plan(payload, label="plan")
    if errs:
        raise PlanValidationError(errs[0])


__all__ = [
    "PlanValidationError",
    "assert_valid_plan",
    "validate_plan",
]
