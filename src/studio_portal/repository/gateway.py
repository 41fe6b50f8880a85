# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, cast

from studio_portal import time
from studio_portal.model.collection import Collection
from studio_portal.model.entity_id import EntityId
from studio_portal.model.idea import Idea
from studio_portal.model.roster import ROSTER_ID, Roster
from studio_portal.model.task import UNASSIGNED_ARTIST, Task
from studio_portal.repository.document_store import DocumentStore


class PersistenceGateway:
    """Per-user CRUD over the tasks, ideas and artists collections."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["start_date"] = time.datetime_to_local_date_str(
            serializable_task["start_date"]
        )
        serializable_task["deadline"] = time.datetime_to_local_date_str(
            serializable_task["deadline"]
        )
        for phase in serializable_task["phases"]:
            phase["end_date"] = time.datetime_to_local_date_str(phase["end_date"])
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["start_date"] = time.normalize_date(
            deserializable_task.get("start_date")
        )
        deserializable_task["deadline"] = time.normalize_date(
            deserializable_task.get("deadline")
        )
        deserializable_task["artist"] = (
            deserializable_task.get("artist") or UNASSIGNED_ARTIST
        )
        deserializable_task["phases"] = deserializable_task.get("phases") or []
        for phase in deserializable_task["phases"]:
            phase["end_date"] = time.normalize_date(phase.get("end_date"))
        return cast(Task, deserializable_task)

    def __convert_idea_for_serialization(self, idea: Idea) -> dict[str, Any]:
        serializable_idea = cast(dict[str, Any], idea)
        serializable_idea["created_at"] = time.datetime_to_iso_str(
            serializable_idea["created_at"]
        )
        return serializable_idea

    def __convert_idea_for_deserialization(self, idea: dict[str, Any]) -> Idea:
        deserializable_idea = idea
        created_at = deserializable_idea.get("created_at")
        deserializable_idea["created_at"] = (
            time.datetime_from_str(created_at)
            if created_at is not None
            else time.now_local()
        )
        return cast(Idea, deserializable_idea)

    def list_tasks(self, user_id: str) -> list[Task]:
        return [
            self.__convert_task_for_deserialization(document)
            for document in self.store.query_by_user(Collection.TASKS, user_id)
        ]

    def upsert_task(self, task: Task, user_id: str) -> Task:
        stored_task = deepcopy(task)
        stored_task["user_id"] = user_id
        self.store.upsert(
            Collection.TASKS,
            self.__convert_task_for_serialization(deepcopy(stored_task)),
        )
        return stored_task

    def delete_task(self, id: EntityId, user_id: str) -> None:
        self.store.delete(Collection.TASKS, id, user_id)

    def list_ideas(self, user_id: str) -> list[Idea]:
        return [
            self.__convert_idea_for_deserialization(document)
            for document in self.store.query_by_user(Collection.IDEAS, user_id)
        ]

    def upsert_idea(self, idea: Idea, user_id: str) -> Idea:
        stored_idea = deepcopy(idea)
        stored_idea["user_id"] = user_id
        self.store.upsert(
            Collection.IDEAS,
            self.__convert_idea_for_serialization(deepcopy(stored_idea)),
        )
        return stored_idea

    def delete_idea(self, id: EntityId, user_id: str) -> None:
        self.store.delete(Collection.IDEAS, id, user_id)

    def get_roster(self, user_id: str) -> Roster:
        """A user without a stored roster gets an empty one."""
        document = self.store.read(Collection.ARTISTS, ROSTER_ID, user_id)
        if document is None:
            return {"id": ROSTER_ID, "user_id": user_id, "list": []}
        return {
            "id": document.get("id", ROSTER_ID),
            "user_id": document.get("user_id", user_id),
            "list": list(document.get("list") or []),
        }

    def upsert_roster(self, roster: Roster) -> Roster:
        self.store.upsert(Collection.ARTISTS, cast(dict[str, Any], deepcopy(roster)))
        return deepcopy(roster)
