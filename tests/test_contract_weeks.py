from __future__ import annotations

import datetime as dt
import unittest

from tripweek.quarters import QUARTERS, quarter_by_id, quarter_for_month
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


class TestWeekModelContract(unittest.TestCase):
    def test_parse_iso_date_is_component_based(self) -> None:
        self.assertEqual(parse_iso_date("2025-03-17"), dt.date(2025, 3, 17))
        self.assertEqual(parse_iso_date(" 2025-01-01 "), dt.date(2025, 1, 1))

    def test_parse_iso_date_rejects_malformed(self) -> None:
        for bad in ("2025-3-1", "2025/03/01", "2025-02-30", "", "2025-03-17T00:00:00Z"):
            with self.assertRaises(ValueError, msg=bad):
                parse_iso_date(bad)

    def test_monday_of(self) -> None:
        # Mon..Sun of the week starting 2025-03-17
        for day in range(17, 24):
            self.assertEqual(monday_of(f"2025-03-{day:02d}"), dt.date(2025, 3, 17))
        # Sunday maps six days back, never forward
        self.assertEqual(monday_of(dt.date(2025, 3, 23)), dt.date(2025, 3, 17))
        self.assertEqual(monday_of(dt.datetime(2025, 3, 19, 23, 59)), dt.date(2025, 3, 17))
        # Crosses a year boundary
        self.assertEqual(monday_of("2025-01-01"), dt.date(2024, 12, 30))

    def test_friday_of(self) -> None:
        self.assertEqual(friday_of("2025-03-17"), dt.date(2025, 3, 21))
        self.assertEqual(friday_of("2025-03-23"), dt.date(2025, 3, 21))

    def test_overlaps_week_ignores_weekends(self) -> None:
        self.assertTrue(overlaps_week("2025-03-17", "2025-03-21", "2025-03-17"))
        self.assertTrue(overlaps_week("2025-03-21", "2025-03-21", "2025-03-19"))
        self.assertFalse(overlaps_week("2025-03-22", "2025-03-23", "2025-03-17"))
        self.assertFalse(overlaps_week("2025-03-22", "2025-03-23", "2025-03-24"))
        self.assertFalse(overlaps_week("2025-03-10", "2025-03-16", "2025-03-17"))

    def test_overlaps_week_range_spanning_two_weeks(self) -> None:
        self.assertTrue(overlaps_week("2025-03-21", "2025-03-24", "2025-03-17"))
        self.assertTrue(overlaps_week("2025-03-21", "2025-03-24", "2025-03-24"))
        self.assertTrue(overlaps_week(dt.date(2025, 3, 1), dt.date(2025, 3, 31), "2025-03-17"))

    def test_all_mondays_in_quarter(self) -> None:
        q3 = all_mondays_in_quarter((7, 8, 9), 2025)
        self.assertEqual(len(q3), 13)
        self.assertEqual(q3[0], dt.date(2025, 7, 7))
        self.assertEqual(q3[-1], dt.date(2025, 9, 29))
        self.assertEqual(q3, sorted(q3))
        self.assertTrue(all(d.weekday() == 0 for d in q3))

        q1 = all_mondays_in_quarter((1, 2, 3), 2025)
        self.assertEqual([d.isoformat() for d in q1[:4]], ["2025-01-06", "2025-01-13", "2025-01-20", "2025-01-27"])

    def test_mondays_in_month(self) -> None:
        self.assertEqual([d.day for d in mondays_in_month(2025, 9)], [1, 8, 15, 22, 29])
        self.assertEqual([d.day for d in mondays_in_month(2025, 2)], [3, 10, 17, 24])

    def test_mondays_in_range_is_inclusive(self) -> None:
        out = mondays_in_range("2025-03-18", "2025-04-07")
        self.assertEqual([to_iso(d) for d in out], ["2025-03-24", "2025-03-31", "2025-04-07"])
        self.assertEqual(mondays_in_range("2025-03-17", "2025-03-17"), [dt.date(2025, 3, 17)])
        self.assertEqual(mondays_in_range("2025-03-18", "2025-03-23"), [])

    def test_weeks_in_year(self) -> None:
        weeks = weeks_in_year(2025)
        self.assertEqual(len(weeks), 53)
        self.assertEqual(weeks[0]["iso"], "2024-12-30")
        self.assertEqual(weeks[0]["month"], 12)
        self.assertEqual(weeks[-1]["iso"], "2025-12-29")

    def test_week_number_and_same_week(self) -> None:
        self.assertEqual(week_number("2024-12-31", 2025), 1)
        self.assertEqual(week_number(dt.date(2025, 1, 6), 2025), 2)
        self.assertTrue(is_same_week("2025-03-17", "2025-03-23"))
        self.assertFalse(is_same_week("2025-03-23", "2025-03-24"))

    def test_current_quarter(self) -> None:
        self.assertEqual(current_quarter("2025-01-01"), 1)
        self.assertEqual(current_quarter("2025-06-30"), 2)
        self.assertEqual(current_quarter(dt.date(2025, 7, 1)), 3)
        self.assertEqual(current_quarter("2025-12-31"), 4)

    def test_time_range_dates(self) -> None:
        self.assertEqual(time_range_dates("current-year", 2025), (dt.date(2025, 1, 1), dt.date(2025, 12, 31)))
        self.assertEqual(
            time_range_dates("current-quarter", dt.date(2025, 5, 10)),
            (dt.date(2025, 4, 1), dt.date(2025, 6, 30)),
        )
        self.assertEqual(
            time_range_dates("current-quarter", "2025-11-02"),
            (dt.date(2025, 10, 1), dt.date(2025, 12, 31)),
        )
        # Month arithmetic clamps to the end of the shorter month
        self.assertEqual(
            time_range_dates("next-3-months", dt.date(2025, 1, 31)),
            (dt.date(2025, 1, 31), dt.date(2025, 4, 30)),
        )
        self.assertEqual(
            time_range_dates("next-12-months", dt.date(2024, 2, 29)),
            (dt.date(2024, 2, 29), dt.date(2025, 2, 28)),
        )
        self.assertEqual(time_range_dates("next-6-months", 2025), (dt.date(2025, 1, 1), dt.date(2025, 7, 1)))
        self.assertEqual(time_range_dates("bogus", 2026), (dt.date(2026, 1, 1), dt.date(2026, 12, 31)))


class TestQuartersContract(unittest.TestCase):
    def test_quarter_lookup(self) -> None:
        q3 = quarter_by_id(3)
        self.assertEqual((q3.name, q3.months), ("Q3", (7, 8, 9)))
        self.assertEqual([q.id for q in QUARTERS], [1, 2, 3, 4])

    def test_quarter_for_month(self) -> None:
        self.assertEqual(quarter_for_month(1).id, 1)
        self.assertEqual(quarter_for_month(6).id, 2)
        self.assertEqual(quarter_for_month(12).id, 4)
        self.assertIsNone(quarter_for_month(13))


if __name__ == "__main__":
    unittest.main(verbosity=2)
