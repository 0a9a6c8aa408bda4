"""Load a travel plan (state-store JSON export) into typed records.

Export shape:
  {
    "year": 2025,
    "events": [...],
    "constraints": [...],
    "eventTypeConfigs": {type_id: {"isHardStop": bool, ...}},
    "constraintTypeConfigs": {type_id: {"isHardStop": bool, ...}},
    "customLocations": [...]
  }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .errors import RecordError
from .model import Constraint, Event
from .typeconfig import HardStopPredicate, hard_stop_lookup
from .util.console import obs_warn
from .weeks import monday_of, parse_iso_date

JsonPath = Union[str, Path]

_OBS_TAG = "tripweek.plan_io"


@dataclass(frozen=True)
class Plan:
    """A loaded plan export.

    event_type_configs and custom_locations are not read by the scoring
    core; they are kept so the export round-trips.
    """

    year: Optional[int]
    events: Tuple[Event, ...]
    constraints: Tuple[Constraint, ...]
    event_type_configs: Dict[str, Any] = field(default_factory=dict)
    constraint_type_configs: Dict[str, Any] = field(default_factory=dict)
    custom_locations: Tuple[str, ...] = ()

    def hard_stop(self) -> HardStopPredicate:
        """Hard-stop predicate for constraint types."""
        return hard_stop_lookup(self.constraint_type_configs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "events": [e.to_dict() for e in self.events],
            "constraints": [c.to_dict() for c in self.constraints],
            "eventTypeConfigs": dict(self.event_type_configs),
            "constraintTypeConfigs": dict(self.constraint_type_configs),
            "customLocations": list(self.custom_locations),
        }


def _req_str(d: Dict[str, Any], key: str, what: str) -> str:
    v = d.get(key)
    if not isinstance(v, str) or not v.strip():
        raise RecordError(f"{what} {key} is required")
    return v


def _as_bool(v: Any, default: bool, what: str, key: str) -> bool:
    if v is None:
        return default
    if not isinstance(v, bool):
        raise RecordError(f"{what} {key} must be a boolean; got {v!r}")
    return v


def _date_str(v: Any, what: str, key: str) -> str:
    try:
        return parse_iso_date(v).isoformat()
    except (TypeError, ValueError) as ex:
        raise RecordError(f"{what} {key} must be YYYY-MM-DD; got {v!r}") from ex


def event_from_dict(d: Dict[str, Any], *, default_id: Optional[str] = None) -> Event:
    """Build an Event, normalising flexible trips to their Monday.

    A trip is flexible when isFixed is false or endDate is absent; its
    startDate becomes the Monday of that week and endDate is dropped.
    """
    if not isinstance(d, dict):
        raise RecordError(f"event must be an object; got {type(d).__name__}")

    title = _req_str(d, "title", "Event")
    location = _req_str(d, "location", "Event")
    type_id = _req_str(d, "type", "Event")
    if not d.get("startDate"):
        raise RecordError("Event startDate is required")

    start = _date_str(d.get("startDate"), "Event", "startDate")
    end_raw = d.get("endDate")
    is_fixed = _as_bool(d.get("isFixed"), True, "Event", "isFixed")

    if is_fixed and end_raw:
        end: Optional[str] = _date_str(end_raw, "Event", "endDate")
        if end < start:  # type: ignore[operator]
            raise RecordError(f"Event endDate {end} is before startDate {start}")
    else:
        start = monday_of(start).isoformat()
        end = None

    duration = d.get("duration", 1)
    if isinstance(duration, bool) or not isinstance(duration, int) or duration < 1:
        raise RecordError("Event duration must be at least 1 week")

    ev_id = d.get("id")
    if ev_id is None or str(ev_id) == "":
        if not default_id:
            raise RecordError("Event id is required")
        ev_id = default_id

    return Event(
        id=str(ev_id),
        title=title,
        type=type_id,
        location=location,
        start_date=start,
        end_date=end,
        duration=int(duration),
        is_fixed=is_fixed,
        archived=_as_bool(d.get("archived"), False, "Event", "archived"),
    )


def constraint_from_dict(d: Dict[str, Any], *, default_id: Optional[str] = None) -> Constraint:
    if not isinstance(d, dict):
        raise RecordError(f"constraint must be an object; got {type(d).__name__}")

    title = _req_str(d, "title", "Constraint")
    type_id = _req_str(d, "type", "Constraint")
    if not d.get("startDate"):
        raise RecordError("Constraint startDate is required")
    start = _date_str(d.get("startDate"), "Constraint", "startDate")
    end = _date_str(d["endDate"], "Constraint", "endDate") if d.get("endDate") else start
    if end < start:
        raise RecordError(f"Constraint endDate {end} is before startDate {start}")

    c_id = d.get("id")
    if c_id is None or str(c_id) == "":
        if not default_id:
            raise RecordError("Constraint id is required")
        c_id = default_id

    return Constraint(id=str(c_id), title=title, type=type_id, start_date=start, end_date=end)


def _records(obj: Dict[str, Any], key: str) -> List[Any]:
    v = obj.get(key)
    if v is None:
        return []
    if not isinstance(v, list):
        raise RecordError(f"plan {key} must be a list; got {type(v).__name__}")
    return v


def plan_from_dict(obj: Dict[str, Any], *, strict: bool = True) -> Plan:
    """Convert an exported plan object.

    strict=True raises RecordError on the first bad record; strict=False
    skips it (warning on stderr when TRIPWEEK_OBS_LOG is set).
    """
    if not isinstance(obj, dict):
        raise RecordError(f"plan must be a JSON object; got {type(obj).__name__}")

    events: List[Event] = []
    for i, raw in enumerate(_records(obj, "events")):
        try:
            events.append(event_from_dict(raw, default_id=f"event-{i + 1}"))
        except RecordError as ex:
            if strict:
                raise RecordError(f"events[{i}]: {ex}") from ex
            obs_warn(_OBS_TAG, f"skipping events[{i}]: {ex}")

    constraints: List[Constraint] = []
    for i, raw in enumerate(_records(obj, "constraints")):
        try:
            constraints.append(constraint_from_dict(raw, default_id=f"constraint-{i + 1}"))
        except RecordError as ex:
            if strict:
                raise RecordError(f"constraints[{i}]: {ex}") from ex
            obs_warn(_OBS_TAG, f"skipping constraints[{i}]: {ex}")

    year = obj.get("year")
    ev_cfg = obj.get("eventTypeConfigs")
    c_cfg = obj.get("constraintTypeConfigs")
    locs = obj.get("customLocations")

    return Plan(
        year=year if isinstance(year, int) and not isinstance(year, bool) else None,
        events=tuple(events),
        constraints=tuple(constraints),
        event_type_configs=dict(ev_cfg) if isinstance(ev_cfg, dict) else {},
        constraint_type_configs=dict(c_cfg) if isinstance(c_cfg, dict) else {},
        custom_locations=tuple(str(x) for x in locs if isinstance(x, str)) if isinstance(locs, list) else (),
    )


def load_plan_from_json(path: JsonPath, *, strict: bool = False) -> Plan:
    """Read a plan export from disk.

    Unlike plan_from_dict, this defaults to strict=False: malformed records
    in a file are skipped (with an obs warning) rather than raised.
    """
    p = Path(path)
    obj = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    return plan_from_dict(obj, strict=strict)


def active_events(events: Sequence[Event]) -> list[Event]:
    """Drop archived events; the scoring core expects callers to do this."""
    return [e for e in events if not e.archived]
