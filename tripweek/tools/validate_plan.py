#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from tripweek.validate import validate_plan


def _die(msg: str, rc: int = 2) -> int:
    print(f"[tripweek-validate-plan] ERROR: {msg}", file=sys.stderr)
    return rc


def _load_plan_json(p: Path) -> Dict[str, Any]:
    obj = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(obj, dict):
        raise ValueError(f"plan must be a JSON object; got {type(obj).__name__}")
    return obj


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="tripweek-validate-plan",
        description="Validate a travel plan JSON export (events, constraints, type configs).",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Input plan JSON path")
    ns = ap.parse_args(argv)

    p = Path(ns.in_json)
    if not p.exists():
        return _die(f"Missing JSON file: {p}")
    try:
        plan = _load_plan_json(p)
    except ValueError as e:
        return _die(f"Failed to load JSON plan: {p} ({e})")

    errs = validate_plan(plan, label=f"json:{p}")
    if errs:
        print("[tripweek-validate-plan] FAIL", file=sys.stderr)
        for e in errs:
            print(f"  - {e}", file=sys.stderr)
        return 3

    print("[tripweek-validate-plan] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
