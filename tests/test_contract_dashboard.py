import tempfile
import unittest
from pathlib import Path

import pendulum

from studio_portal.service.brief import brief_filename, export_brief
from studio_portal.service.dashboard import (
    dashboard_summary,
    is_task_completed,
    pipeline_columns,
    social_board,
    tasks_due_this_week,
)
from studio_portal.service.idea import new_idea
from studio_portal.template.task import get_seed_tasks


NOW = pendulum.datetime(2025, 6, 2, 12, tz="local")


def with_deadline(task, deadline):
    task["deadline"] = deadline
    return task


class TestDashboardContract(unittest.TestCase):
    def setUp(self):
        self.project, self.social = get_seed_tasks()

    def test_completion_is_decided_by_last_phase(self):
        self.assertFalse(is_task_completed(self.project))

        self.project["phases"][-1]["progress"] = 100
        self.assertTrue(is_task_completed(self.project))

    def test_due_this_week_is_strictly_inside_the_window(self):
        tasks = [
            with_deadline(get_seed_tasks()[0], NOW),
            with_deadline(get_seed_tasks()[0], NOW.add(days=3)),
            with_deadline(get_seed_tasks()[0], NOW.add(days=7)),
            with_deadline(get_seed_tasks()[0], NOW.subtract(days=1)),
        ]

        due = tasks_due_this_week(tasks, NOW)

        self.assertEqual([t["deadline"] for t in due], [NOW.add(days=3)])

    def test_summary(self):
        self.project["artist"] = "Jeki"
        extra = get_seed_tasks()[0]
        extra["artist"] = ""

        summary = dashboard_summary([self.project, self.social, extra], NOW)

        self.assertEqual(summary["total"], 3)
        self.assertEqual(summary["social_count"], 1)
        self.assertEqual(summary["project_count"], 2)
        self.assertEqual(summary["workload"], {"Jeki": 1, "Salini": 1, "Unassigned": 1})

    def test_social_board_splits_on_first_phase(self):
        ready = get_seed_tasks()[1]
        ready["phases"][0]["progress"] = 100

        in_production, ready_to_post = social_board([self.project, self.social, ready])

        self.assertEqual(in_production, [self.social])
        self.assertEqual(ready_to_post, [ready])

    def test_pipeline_columns(self):
        inbox = new_idea("A", "")
        ready = new_idea("B", "")
        ready["stage"] = "ready"

        columns = pipeline_columns([ready, inbox])

        self.assertEqual(list(columns), ["inbox", "developing", "ready"])
        self.assertEqual(columns["inbox"], [inbox])
        self.assertEqual(columns["developing"], [])
        self.assertEqual(columns["ready"], [ready])


class TestBriefExportContract(unittest.TestCase):
    def test_filename(self):
        task = get_seed_tasks()[0]

        self.assertEqual(brief_filename(task), "Xmas_Guide_brief.txt")

        task["name"] = "Summer  Sale / Week 1"
        self.assertEqual(brief_filename(task), "Summer_Sale_-_Week_1_brief.txt")

    def test_export_writes_the_briefing(self):
        task = get_seed_tasks()[0]

        with tempfile.TemporaryDirectory() as directory:
            file_path = export_brief(task, Path(directory))

            self.assertEqual(file_path.name, "Xmas_Guide_brief.txt")
            self.assertEqual(file_path.read_text(), "Main campaign visual.")


if __name__ == "__main__":
    unittest.main(verbosity=2)
