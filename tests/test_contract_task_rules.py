import unittest

import pendulum

from studio_portal.errors import RecordNotFoundError
from studio_portal.service.task import (
    assign_phase_colors,
    build_project_task,
    build_social_task,
    update_phase_progress,
)
from studio_portal.template.draft import (
    get_project_task_draft_template,
    get_social_task_draft_template,
    social_task_draft_from_task,
)


def project_draft(**fields):
    draft = get_project_task_draft_template(["Salini", "Jeki"])
    draft["task_name"] = "Poster"
    draft["start_date"] = "2025-01-01"
    draft["phases"] = []
    draft.update(fields)
    return draft


def phase(name, end_date="", progress=0):
    return {"id": None, "name": name, "end_date": end_date, "progress": progress}


class TestPhaseColorsContract(unittest.TestCase):
    def test_five_phases(self):
        self.assertEqual(
            assign_phase_colors(5), ["green", "blue", "purple", "yellow", "red"]
        )

    def test_filler_colors_cycle_by_index(self):
        self.assertEqual(
            assign_phase_colors(7),
            ["green", "blue", "purple", "orange", "green", "yellow", "red"],
        )

    def test_short_task(self):
        self.assertEqual(assign_phase_colors(2), ["yellow", "red"])
        self.assertEqual(assign_phase_colors(1), ["red"])
        self.assertEqual(assign_phase_colors(0), [])


class TestSaveProjectTaskContract(unittest.TestCase):
    def test_missing_name_or_start_is_rejected(self):
        self.assertIsNone(build_project_task(project_draft(task_name="")))
        self.assertIsNone(build_project_task(project_draft(start_date="")))

    def test_phases_sorted_by_end_date_and_colored_by_position(self):
        task = build_project_task(
            project_draft(
                phases=[
                    phase("Final", "2025-01-20"),
                    phase("Sketch", "2025-01-05"),
                    phase("Color", "2025-01-12"),
                ]
            )
        )

        self.assertEqual([p["name"] for p in task["phases"]], ["Sketch", "Color", "Final"])
        self.assertEqual([p["color"] for p in task["phases"]], ["green", "yellow", "red"])
        self.assertEqual(task["deadline"], pendulum.datetime(2025, 1, 20, tz="local"))

    def test_phase_without_end_date_falls_back_to_deadline_then_start(self):
        with_deadline = build_project_task(
            project_draft(deadline="2025-02-01", phases=[phase("Only")])
        )
        without_deadline = build_project_task(project_draft(phases=[phase("Only")]))

        self.assertEqual(
            with_deadline["phases"][0]["end_date"],
            pendulum.datetime(2025, 2, 1, tz="local"),
        )
        self.assertEqual(
            without_deadline["phases"][0]["end_date"],
            pendulum.datetime(2025, 1, 1, tz="local"),
        )

    def test_explicit_deadline_is_kept(self):
        task = build_project_task(
            project_draft(deadline="2025-03-01", phases=[phase("A", "2025-01-10")])
        )

        self.assertEqual(task["deadline"], pendulum.datetime(2025, 3, 1, tz="local"))

    def test_no_phases_deadline_is_start(self):
        task = build_project_task(project_draft())

        self.assertEqual(task["deadline"], task["start_date"])
        self.assertEqual(task["phases"], [])

    def test_edit_reuses_id_and_new_task_gets_fresh_one(self):
        first = build_project_task(project_draft())
        second = build_project_task(project_draft())
        edited = build_project_task(project_draft(task_id=first["id"]))

        self.assertNotEqual(first["id"], second["id"])
        self.assertEqual(edited["id"], first["id"])

    def test_blank_artist_becomes_unassigned(self):
        task = build_project_task(project_draft(artist=""))

        self.assertEqual(task["artist"], "Unassigned")


class TestSaveSocialTaskContract(unittest.TestCase):
    def social_draft(self, **fields):
        draft = get_social_task_draft_template(["Salini"])
        draft["name"] = "Teaser"
        draft["platform"] = "TikTok"
        draft["start_date"] = "2025-01-01"
        draft["deadline"] = "2025-01-10"
        draft.update(fields)
        return draft

    def test_new_social_task_gets_a_production_phase(self):
        task = build_social_task(self.social_draft())

        self.assertEqual(task["name"], "TikTok: Teaser")
        self.assertEqual(task["type"], "social")
        self.assertEqual(len(task["phases"]), 1)
        self.assertEqual(task["phases"][0]["name"], "Production")
        self.assertEqual(task["phases"][0]["color"], "social")
        self.assertEqual(task["phases"][0]["progress"], 0)
        self.assertEqual(task["phases"][0]["end_date"], task["deadline"])

    def test_required_fields(self):
        self.assertIsNone(build_social_task(self.social_draft(name="")))
        self.assertIsNone(build_social_task(self.social_draft(artist="")))
        self.assertIsNone(build_social_task(self.social_draft(deadline="")))

    def test_missing_start_defaults_to_today(self):
        task = build_social_task(self.social_draft(start_date=""))

        self.assertEqual(task["start_date"], pendulum.today("local"))

    def test_editing_does_not_double_prefix(self):
        task = build_social_task(self.social_draft())
        draft = social_task_draft_from_task(task)
        self.assertEqual(draft["name"], "Teaser")

        draft["name"] = "TikTok: Teaser"
        edited = build_social_task(draft)

        self.assertEqual(edited["name"], "TikTok: Teaser")

    def test_edit_keeps_phases_and_moves_first_to_deadline(self):
        task = build_social_task(self.social_draft())
        task["phases"][0]["progress"] = 60
        draft = social_task_draft_from_task(task)
        draft["deadline"] = "2025-01-15"

        edited = build_social_task(draft)

        self.assertEqual(edited["id"], task["id"])
        self.assertEqual(edited["phases"][0]["id"], task["phases"][0]["id"])
        self.assertEqual(edited["phases"][0]["progress"], 60)
        self.assertEqual(
            edited["phases"][0]["end_date"], pendulum.datetime(2025, 1, 15, tz="local")
        )


class TestProgressUpdateContract(unittest.TestCase):
    def test_only_the_target_phase_changes(self):
        task = build_project_task(
            project_draft(phases=[phase("A", "2025-01-05", 30), phase("B", "2025-01-09")])
        )

        updated = update_phase_progress(task, task["phases"][1]["id"], 70)

        self.assertEqual([p["progress"] for p in updated["phases"]], [30, 70])
        self.assertEqual(task["phases"][1]["progress"], 0)

    def test_unknown_phase(self):
        task = build_project_task(project_draft(phases=[phase("A", "2025-01-05")]))

        with self.assertRaises(RecordNotFoundError):
            update_phase_progress(task, "missing", 10)

    def test_out_of_range(self):
        task = build_project_task(project_draft(phases=[phase("A", "2025-01-05")]))

        with self.assertRaises(ValueError):
            update_phase_progress(task, task["phases"][0]["id"], 110)


if __name__ == "__main__":
    unittest.main(verbosity=2)
