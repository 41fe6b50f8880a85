# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from studio_portal.model.entity_id import EntityId
from studio_portal.model.idea import Idea
from studio_portal.model.task import Task


class RecordStore:
    """
    The local projection of one user's records.

    It is hydrated from the gateway and mutated optimistically on every
    write; it is never the authority. Callers receive copies.
    """

    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self._ideas: Optional[list[Idea]] = None
        self._artists: Optional[list[str]] = None

    @property
    def is_hydrated(self) -> bool:
        return self._tasks is not None

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            raise ValueError("record store has not been hydrated")
        return self._tasks

    @property
    def ideas(self) -> list[Idea]:
        if self._ideas is None:
            raise ValueError("record store has not been hydrated")
        return self._ideas

    @property
    def artists(self) -> list[str]:
        if self._artists is None:
            raise ValueError("record store has not been hydrated")
        return self._artists

    def hydrate(self, tasks: list[Task], ideas: list[Idea], artists: list[str]) -> None:
        self._tasks = deepcopy(tasks)
        self._ideas = deepcopy(ideas)
        self._artists = list(artists)

    def clear(self) -> None:
        self._tasks = None
        self._ideas = None
        self._artists = None

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def find_task(self, id: EntityId) -> Optional[Task]:
        for task in self.tasks:
            if task["id"] == id:
                return deepcopy(task)
        return None

    def put_task(self, task: Task) -> None:
        """Replace the task with the same id, or append it."""
        for index, existing in enumerate(self.tasks):
            if existing["id"] == task["id"]:
                self.tasks[index] = deepcopy(task)
                return
        self.tasks.append(deepcopy(task))

    def remove_task(self, id: EntityId) -> None:
        self._tasks = [task for task in self.tasks if task["id"] != id]

    def get_all_ideas(self) -> list[Idea]:
        return deepcopy(self.ideas)

    def find_idea(self, id: EntityId) -> Optional[Idea]:
        for idea in self.ideas:
            if idea["id"] == id:
                return deepcopy(idea)
        return None

    def put_idea(self, idea: Idea) -> None:
        for index, existing in enumerate(self.ideas):
            if existing["id"] == idea["id"]:
                self.ideas[index] = deepcopy(idea)
                return
        self.ideas.append(deepcopy(idea))

    def remove_idea(self, id: EntityId) -> None:
        self._ideas = [idea for idea in self.ideas if idea["id"] != id]

    def get_all_artists(self) -> list[str]:
        return list(self.artists)

    def set_all_artists(self, artists: list[str]) -> None:
        self._artists = list(artists)
