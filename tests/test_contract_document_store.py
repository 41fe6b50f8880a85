import tempfile
import unittest
from pathlib import Path

import pendulum

from studio_portal.errors import ConfigurationError, PersistenceError
from studio_portal.repository.document_store import DocumentStore
from studio_portal.repository.gateway import PersistenceGateway
from studio_portal.template.idea import get_idea_template
from studio_portal.template.task import get_seed_tasks


class TestDocumentStoreContract(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.store = DocumentStore(self.root)

    def tearDown(self):
        self._tmp.cleanup()

    def test_records_are_partitioned_by_user(self):
        self.store.upsert("tasks", {"id": "a", "user_id": "alice", "name": "A"})
        self.store.upsert("tasks", {"id": "a", "user_id": "bob", "name": "B"})

        self.assertEqual(
            [d["name"] for d in self.store.query_by_user("tasks", "alice")], ["A"]
        )
        self.assertEqual(
            [d["name"] for d in self.store.query_by_user("tasks", "bob")], ["B"]
        )
        self.assertEqual(self.store.query_by_user("tasks", "carol"), [])

    def test_delete_needs_id_and_user_and_is_idempotent(self):
        self.store.upsert("tasks", {"id": "a", "user_id": "alice"})
        self.store.delete("tasks", "a", "bob")
        self.assertIsNotNone(self.store.read("tasks", "a", "alice"))

        self.store.delete("tasks", "a", "alice")
        self.store.delete("tasks", "a", "alice")
        self.assertIsNone(self.store.read("tasks", "a", "alice"))

    def test_upsert_requires_id_and_user(self):
        with self.assertRaises(PersistenceError):
            self.store.upsert("tasks", {"id": "a"})
        with self.assertRaises(PersistenceError):
            self.store.upsert("tasks", {"user_id": "alice"})

    def test_ids_with_path_separators_stay_inside_partition(self):
        self.store.upsert("tasks", {"id": "../x", "user_id": "a/b"})

        self.assertEqual(len(self.store.query_by_user("tasks", "a/b")), 1)
        self.assertFalse((self.root / "x.yaml").exists())

    def test_missing_root_is_a_configuration_error(self):
        store = DocumentStore(self.root / "missing")

        with self.assertRaises(ConfigurationError):
            store.query_by_user("tasks", "alice")

    def test_corrupt_record_is_a_read_failure(self):
        self.store.upsert("tasks", {"id": "a", "user_id": "alice"})
        (self.root / "tasks" / "alice" / "a.yaml").write_text("{unclosed: [")

        with self.assertRaises(PersistenceError):
            self.store.query_by_user("tasks", "alice")


class TestPersistenceGatewayContract(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = DocumentStore(Path(self._tmp.name))
        self.gateway = PersistenceGateway(self.store)

    def tearDown(self):
        self._tmp.cleanup()

    def test_idempotent_upsert(self):
        task = get_seed_tasks()[0]

        self.gateway.upsert_task(task, "alice")
        once = self.gateway.list_tasks("alice")
        self.gateway.upsert_task(task, "alice")
        twice = self.gateway.list_tasks("alice")

        self.assertEqual(len(twice), 1)
        self.assertEqual(once, twice)

    def test_task_round_trip_keeps_calendar_dates(self):
        task = get_seed_tasks()[0]

        stored = self.gateway.upsert_task(task, "alice")
        loaded = self.gateway.list_tasks("alice")[0]

        self.assertEqual(stored["user_id"], "alice")
        self.assertEqual(loaded["user_id"], "alice")
        self.assertEqual(loaded["start_date"], task["start_date"])
        self.assertEqual(loaded["deadline"], task["deadline"])
        self.assertEqual(
            [p["end_date"] for p in loaded["phases"]],
            [p["end_date"] for p in task["phases"]],
        )
        self.assertIsNone(task["user_id"])

    def test_missing_artist_reads_as_unassigned(self):
        self.store.upsert(
            "tasks",
            {
                "id": "t",
                "user_id": "alice",
                "type": "project",
                "name": "Legacy",
                "start_date": "2025-01-01",
                "deadline": "2025-01-05",
                "phases": [],
            },
        )

        self.assertEqual(self.gateway.list_tasks("alice")[0]["artist"], "Unassigned")

    def test_idea_round_trip(self):
        idea = get_idea_template()
        idea["title"] = "Mascot"
        idea["created_at"] = pendulum.datetime(2025, 1, 1, 9, 30, tz="UTC")

        self.gateway.upsert_idea(idea, "alice")
        loaded = self.gateway.list_ideas("alice")

        self.assertEqual(len(loaded), 1)
        self.assertEqual(loaded[0]["title"], "Mascot")
        self.assertEqual(loaded[0]["created_at"], idea["created_at"])

        self.gateway.delete_idea(idea["id"], "alice")
        self.assertEqual(self.gateway.list_ideas("alice"), [])

    def test_missing_roster_is_empty(self):
        roster = self.gateway.get_roster("alice")

        self.assertEqual(roster["list"], [])
        self.assertEqual(roster["user_id"], "alice")

    def test_roster_round_trip(self):
        self.gateway.upsert_roster({"id": "artists", "user_id": "alice", "list": ["Kai"]})

        self.assertEqual(self.gateway.get_roster("alice")["list"], ["Kai"])
        self.assertEqual(self.gateway.get_roster("bob")["list"], [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
