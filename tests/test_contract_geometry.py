import unittest

import pendulum

from studio_portal.geometry import position_in_window
from studio_portal.time import date_for_input, normalize_date


DAY_0 = pendulum.datetime(2025, 3, 1, tz="local")


def day(offset):
    return DAY_0.add(days=offset)


class TestPositionInWindowContract(unittest.TestCase):
    def test_span_inside_viewport_stays_within_bounds(self):
        position = position_in_window(day(10), day(20), day(0), day(40))

        self.assertEqual(position, {"left": 25.0, "width": 25.0})
        self.assertGreaterEqual(position["left"], 0)
        self.assertLessEqual(position["left"] + position["width"], 100)

    def test_span_starting_before_viewport_is_clipped_on_the_left(self):
        position = position_in_window(day(-5), day(5), day(0), day(40))

        self.assertEqual(position["left"], 0)
        self.assertAlmostEqual(position["width"], 12.5)

    def test_span_entirely_after_viewport_is_not_visible(self):
        self.assertIsNone(position_in_window(day(50), day(60), day(0), day(40)))

    def test_span_entirely_before_viewport_is_not_visible(self):
        self.assertIsNone(position_in_window(day(-20), day(-10), day(0), day(40)))

    def test_span_running_past_right_edge_is_not_cropped(self):
        position = position_in_window(day(30), day(50), day(0), day(40))

        self.assertEqual(position, {"left": 75.0, "width": 50.0})

    def test_time_of_day_is_ignored(self):
        position = position_in_window(
            day(10).add(hours=23), day(20).add(hours=1), day(0).add(hours=12), day(40)
        )

        self.assertEqual(position, {"left": 25.0, "width": 25.0})

    def test_accepts_date_strings(self):
        position = position_in_window("2025-03-11", "2025-03-21", "2025-03-01", "2025-04-10")

        self.assertEqual(position, {"left": 25.0, "width": 25.0})

    def test_empty_viewport_is_rejected(self):
        with self.assertRaises(ValueError):
            position_in_window(day(0), day(1), day(5), day(5))


class TestDateNormalizationContract(unittest.TestCase):
    def test_normalize_truncates_to_local_midnight(self):
        normalized = normalize_date(DAY_0.add(hours=15, minutes=30))

        self.assertEqual(normalized, DAY_0)
        self.assertEqual((normalized.hour, normalized.minute), (0, 0))

    def test_unparsable_input_becomes_today(self):
        self.assertEqual(normalize_date("not a date"), pendulum.today("local"))
        self.assertEqual(normalize_date(None), pendulum.today("local"))

    def test_date_for_input(self):
        self.assertEqual(date_for_input(DAY_0.add(hours=9)), "2025-03-01")
        self.assertEqual(date_for_input(""), "")
        self.assertEqual(date_for_input(None), "")
        self.assertEqual(date_for_input("garbage"), "")


if __name__ == "__main__":
    unittest.main(verbosity=2)
