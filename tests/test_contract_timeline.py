import unittest

import pendulum

from studio_portal.service.strategy import cycle_for_month, cycle_labels
from studio_portal.service.task import build_project_task
from studio_portal.service.timeline import (
    calendar_days,
    default_viewport,
    group_tasks_by_artist,
    layout_timeline,
    step_viewport,
    viewport_end,
)
from studio_portal.template.draft import get_project_task_draft_template
from studio_portal.view.views.timeline import span_columns


START = pendulum.datetime(2025, 3, 1, tz="local")


def task(name, artist, start, phases):
    draft = get_project_task_draft_template([])
    draft["task_name"] = name
    draft["artist"] = artist
    draft["start_date"] = start
    draft["phases"] = [
        {"id": None, "name": phase_name, "end_date": end_date, "progress": 0}
        for phase_name, end_date in phases
    ]
    return build_project_task(draft)


class TestTimelineLayoutContract(unittest.TestCase):
    def test_groups_sorted_with_unassigned_last(self):
        tasks = [
            task("Late", "bea", "2025-03-10", []),
            task("Loose", "", "2025-03-01", []),
            task("Early", "bea", "2025-03-02", []),
            task("Mural", "Adam", "2025-03-05", []),
        ]

        groups = group_tasks_by_artist(tasks)

        self.assertEqual([artist for artist, _ in groups], ["Adam", "bea", "Unassigned"])
        self.assertEqual([t["name"] for t in groups[1][1]], ["Early", "Late"])

    def test_phases_chain_from_task_start(self):
        poster = task(
            "Poster", "Adam", "2025-03-01", [("Sketch", "2025-03-11"), ("Final", "2025-03-21")]
        )

        layout = layout_timeline([poster], {"start": START, "days": 40}, today=START)
        spans = layout["groups"][0]["rows"][0]["spans"]

        self.assertEqual([s["position"] for s in spans], [
            {"left": 0.0, "width": 25.0},
            {"left": 25.0, "width": 25.0},
        ])
        self.assertEqual(spans[1]["start"], pendulum.datetime(2025, 3, 11, tz="local"))

    def test_invisible_phases_are_left_out(self):
        poster = task(
            "Poster", "Adam", "2025-01-01", [("Old", "2025-01-10"), ("Now", "2025-03-05")]
        )

        layout = layout_timeline([poster], {"start": START, "days": 40}, today=START)

        self.assertEqual(
            [s["name"] for s in layout["groups"][0]["rows"][0]["spans"]], ["Now"]
        )

    def test_today_marker(self):
        layout = layout_timeline([], {"start": START, "days": 40}, today=START.add(days=10))

        self.assertEqual(layout["today"], {"left": 25.0, "width": 0.0})
        self.assertEqual(layout["groups"], [])
        self.assertEqual(len(layout["days"]), 40)

        outside = layout_timeline([], {"start": START, "days": 40}, today=START.add(days=90))
        self.assertIsNone(outside["today"])


class TestViewportContract(unittest.TestCase):
    def test_default_viewport_starts_before_today(self):
        viewport = default_viewport(40, 10)

        self.assertEqual(viewport["start"], pendulum.today("local").subtract(days=10))
        self.assertEqual(viewport["days"], 40)

    def test_step_slides_by_whole_steps(self):
        viewport = {"start": START, "days": 40}

        self.assertEqual(step_viewport(viewport, 2, 7)["start"], START.add(days=14))
        self.assertEqual(step_viewport(viewport, -1, 7)["start"], START.subtract(days=7))
        self.assertEqual(viewport_end(viewport), START.add(days=40))

    def test_calendar_days(self):
        days = calendar_days({"start": START.add(hours=5), "days": 3})

        self.assertEqual(days, [START, START.add(days=1), START.add(days=2)])

    def test_span_columns(self):
        self.assertEqual(span_columns({"left": 25.0, "width": 25.0}, 40), (10, 10))
        self.assertEqual(span_columns({"left": 75.0, "width": 50.0}, 40), (30, 10))
        self.assertEqual(span_columns({"left": 50.0, "width": 0.0}, 40), (20, 1))
        self.assertIsNone(span_columns({"left": 100.0, "width": 0.0}, 40))


class TestRetailCyclesContract(unittest.TestCase):
    def test_every_month_has_a_cycle(self):
        self.assertEqual(cycle_for_month(1)["name"], "Summer Readiness")
        self.assertEqual(cycle_for_month(6)["name"], "Back-to-School & Harvest")
        self.assertEqual(cycle_for_month(9)["name"], "Holiday Gifting")
        self.assertEqual(cycle_for_month(12)["name"], "Spring & Love")
        self.assertIsNone(cycle_for_month(13))

    def test_labels_at_first_column_and_month_starts(self):
        days = calendar_days({"start": pendulum.datetime(2025, 3, 20, tz="local"), "days": 20})

        labels = cycle_labels(days)

        self.assertEqual(sorted(labels), [0, 12])
        self.assertEqual(labels[0]["name"], "Summer Readiness")
        self.assertEqual(labels[12]["name"], "Back-to-School & Harvest")


if __name__ == "__main__":
    unittest.main(verbosity=2)
