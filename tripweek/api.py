"""tripweek.api

Stable *library* entrypoint for tripweek.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.

Every function here is pure and synchronous: inputs are read, never
mutated, and results are fresh immutable values.
"""

from __future__ import annotations

from tripweek.conflicts import detect_conflicts, event_day_span
from tripweek.consolidate import find_consolidation_opportunities
from tripweek.errors import InvalidQuarterError, RecordError, TripweekError
from tripweek.metrics import compute_travel_metrics, travel_weeks
from tripweek.model import (
    ConsolidationOpportunity,
    Constraint,
    DoubleBooking,
    Event,
    HardConstraintConflict,
    ScoreResult,
    TravelMetrics,
    WeekSuggestion,
)
from tripweek.plan_io import (
    Plan,
    active_events,
    constraint_from_dict,
    event_from_dict,
    load_plan_from_json,
    plan_from_dict,
)
from tripweek.quarters import QUARTERS, TIME_RANGES, Quarter, quarter_by_id, quarter_for_month
from tripweek.scoring import locations_match, score_week
from tripweek.suggest import get_suggestions_for_quarter, get_suggestions_for_time_range
from tripweek.typeconfig import hard_stop_lookup
from tripweek.validate import PlanValidationError, assert_valid_plan, validate_plan
from tripweek.weeks import (
    all_mondays_in_quarter,
    current_quarter,
    friday_of,
    is_same_week,
    monday_of,
    mondays_in_month,
    mondays_in_range,
    overlaps_week,
    parse_iso_date,
    time_range_dates,
    to_iso,
    week_number,
    weeks_in_year,
)


# --- Public API exports ---------------------------------------------------
_PUBLIC_EXPORTS = (
    "ConsolidationOpportunity",
    "Constraint",
    "DoubleBooking",
    "Event",
    "HardConstraintConflict",
    "InvalidQuarterError",
    "Plan",
    "PlanValidationError",
    "QUARTERS",
    "Quarter",
    "RecordError",
    "ScoreResult",
    "TIME_RANGES",
    "TravelMetrics",
    "TripweekError",
    "WeekSuggestion",
    "active_events",
    "all_mondays_in_quarter",
    "assert_valid_plan",
    "compute_travel_metrics",
    "constraint_from_dict",
    "current_quarter",
    "detect_conflicts",
    "event_day_span",
    "event_from_dict",
    "find_consolidation_opportunities",
    "friday_of",
    "get_suggestions_for_quarter",
    "get_suggestions_for_time_range",
    "hard_stop_lookup",
    "is_same_week",
    "load_plan_from_json",
    "locations_match",
    "monday_of",
    "mondays_in_month",
    "mondays_in_range",
    "overlaps_week",
    "parse_iso_date",
    "plan_from_dict",
    "quarter_by_id",
    "quarter_for_month",
    "score_week",
    "time_range_dates",
    "to_iso",
    "travel_weeks",
    "validate_plan",
    "week_number",
    "weeks_in_year",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
