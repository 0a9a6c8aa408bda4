from __future__ import annotations

import unittest


class TestPublicApiLockContract(unittest.TestCase):
    def test_api_module_exports_are_present(self) -> None:
        import tripweek.api as api

        self.assertTrue(hasattr(api, "__all__"))
        self.assertIsInstance(api.__all__, (list, tuple))
        self.assertEqual(len(api.__all__), len(api._PUBLIC_EXPORTS))

        for name in api.__all__:
            self.assertTrue(hasattr(api, name), f"tripweek.api missing public name: {name}")
            self.assertIsNotNone(getattr(api, name), f"tripweek.api {name} is None")

    def test_core_operations_are_public(self) -> None:
        import tripweek.api as api

        for name in (
            "all_mondays_in_quarter",
            "compute_travel_metrics",
            "detect_conflicts",
            "find_consolidation_opportunities",
            "get_suggestions_for_quarter",
            "overlaps_week",
            "score_week",
        ):
            self.assertIn(name, api.__all__)

    def test_package_reexports_match_api_all(self) -> None:
        import tripweek
        import tripweek.api as api

        self.assertEqual(list(tripweek.__all__), list(api.__all__))
        for name in api.__all__:
            self.assertIs(getattr(tripweek, name), getattr(api, name), f"tripweek.{name} must be tripweek.api.{name}")


if __name__ == "__main__":
    unittest.main(verbosity=2)
