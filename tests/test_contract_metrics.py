from __future__ import annotations

import unittest

from tripweek.metrics import compute_travel_metrics, travel_weeks
from tripweek.model import Constraint, Event


def _trip(id, location, start, end=None):
    return Event(
        id=id,
        title=f"Trip {id}",
        type="division",
        location=location,
        start_date=start,
        end_date=end,
        is_fixed=end is not None,
    )


class TestTravelMetricsContract(unittest.TestCase):
    def test_travel_weeks(self) -> None:
        events = [
            _trip("flex", "London", "2025-03-17"),
            _trip("span", "Paris", "2025-03-20", "2025-03-25"),
            _trip("weekend", "Oslo", "2025-03-29", "2025-03-30"),
        ]
        self.assertEqual(travel_weeks(events), ["2025-03-17", "2025-03-24"])
        self.assertEqual(travel_weeks([]), [])

    def test_compute_travel_metrics(self) -> None:
        events = [
            _trip("flex", "London", "2025-03-17"),
            _trip("span", "Paris", "2025-03-20", "2025-03-25"),
            _trip("weekend", "Oslo", "2025-03-29", "2025-03-30"),
        ]
        constraints = [Constraint(id="c1", title="Holiday", type="holiday", start_date="2025-03-30")]
        m = compute_travel_metrics(events, constraints, {"holiday": True})
        self.assertEqual(m.weeks_traveling, 3)
        self.assertEqual(m.weeks_home, 49)
        # flex/span double-booking + weekend trip on the holiday
        self.assertEqual(m.conflicts, 2)
        self.assertEqual(sorted(c.kind for c in m.conflict_details), ["double-booking", "hard-constraint"])
        d = m.to_dict()
        self.assertEqual(d["weeksTraveling"], 3)
        self.assertEqual(d["travelWeeks"], ["2025-03-17", "2025-03-24"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
