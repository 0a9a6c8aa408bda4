from __future__ import annotations

import argparse
import datetime as dt
import json
import os
import sys
from pathlib import Path
from typing import Any, List, Optional

from .conflicts import detect_conflicts
from .consolidate import find_consolidation_opportunities
from .errors import TripweekError
from .metrics import compute_travel_metrics
from .plan_io import Plan, active_events, load_plan_from_json
from .quarters import TIME_RANGES
from .scoring import score_week
from .suggest import get_suggestions_for_quarter, get_suggestions_for_time_range
from .util.console import obs_warn
from .weeks import parse_iso_date


def _die(msg: str, rc: int = 2) -> int:
    print(f"[tripweek] ERROR: {msg}", file=sys.stderr)
    return rc


def _emit(obj: Any) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def _env_year() -> Optional[int]:
    raw = (os.getenv("TRIPWEEK_YEAR", "") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        obs_warn("tripweek.cli", f"ignoring TRIPWEEK_YEAR={raw!r}: not an integer")
        return None


def _resolve_year(arg_year: Optional[int], plan: Plan) -> int:
    if arg_year is not None:
        return int(arg_year)
    env_year = _env_year()
    if env_year is not None:
        return env_year
    if plan.year is not None:
        return int(plan.year)
    return dt.date.today().year


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--plan",
        default=os.getenv("TRIPWEEK_PLAN"),
        help="Plan JSON export (default: env TRIPWEEK_PLAN)",
    )
    common.add_argument("--strict", action="store_true", help="Fail on malformed records instead of skipping them")
    common.add_argument(
        "--include-archived",
        action="store_true",
        help="Keep archived events (they are dropped by default)",
    )

    ap = argparse.ArgumentParser(
        prog="tripweek",
        description="Score travel weeks, suggest dates and report conflicts for a plan JSON export.",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("suggest", parents=[common], help="Top 3 weeks for a trip")
    sp.add_argument("--location", required=True, help="Desired location")
    group = sp.add_mutually_exclusive_group(required=True)
    group.add_argument("--quarter", type=int, help="Calendar quarter 1-4")
    group.add_argument("--range", dest="range_id", help="Time range: " + "|".join(TIME_RANGES))
    sp.add_argument(
        "--year",
        type=int,
        default=None,
        help="Calendar year (default: env TRIPWEEK_YEAR, else plan year, else current year)",
    )
    sp.add_argument("--from", dest="from_date", default=None, help="Reference date YYYY-MM-DD for --range")

    sc = sub.add_parser("score", parents=[common], help="Score one week")
    sc.add_argument("--week", required=True, help="Any date YYYY-MM-DD in the week")
    sc.add_argument("--location", required=True, help="Desired location")

    sub.add_parser("conflicts", parents=[common], help="Hard-constraint conflicts and double-bookings")
    sub.add_parser("consolidate", parents=[common], help="Same-week, same-location trip pairs")
    sub.add_parser("metrics", parents=[common], help="Weeks traveling/home and conflict count")
    return ap


def main(argv: List[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    if not ns.plan:
        return _die("Provide --plan or set TRIPWEEK_PLAN")
    plan_path = Path(ns.plan)
    if not plan_path.exists():
        return _die(f"Missing plan JSON: {plan_path}")
    try:
        plan = load_plan_from_json(plan_path, strict=bool(ns.strict))
    except (ValueError, TripweekError) as e:
        return _die(f"Failed to load plan: {plan_path} ({e})")

    events = list(plan.events) if ns.include_archived else active_events(plan.events)
    constraints = list(plan.constraints)
    hard = plan.hard_stop()

    try:
        if ns.command == "suggest":
            if ns.quarter is not None:
                year = _resolve_year(ns.year, plan)
                res = get_suggestions_for_quarter(ns.quarter, year, ns.location, events, constraints, hard)
            else:
                ref = parse_iso_date(ns.from_date) if ns.from_date else _resolve_year(ns.year, plan)
                res = get_suggestions_for_time_range(ns.range_id, ref, ns.location, events, constraints, hard)
            _emit([s.to_dict() for s in res])
        elif ns.command == "score":
            week = parse_iso_date(ns.week)
            _emit(score_week(week, ns.location, events, constraints, hard).to_dict())
        elif ns.command == "conflicts":
            _emit([c.to_dict() for c in detect_conflicts(events, constraints, hard)])
        elif ns.command == "consolidate":
            _emit([o.to_dict() for o in find_consolidation_opportunities(events)])
        elif ns.command == "metrics":
            _emit(compute_travel_metrics(events, constraints, hard).to_dict())
    except (ValueError, TripweekError) as e:
        return _die(str(e))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
