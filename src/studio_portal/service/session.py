# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

from studio_portal.configuration import DEFAULT_ARTISTS
from studio_portal.errors import PersistenceError, RecordNotFoundError
from studio_portal.model.draft import ProjectTaskDraft, SocialTaskDraft, TaskDraft
from studio_portal.model.entity_id import EntityId
from studio_portal.model.idea import Idea
from studio_portal.model.task import Task
from studio_portal.repository.gateway import PersistenceGateway
from studio_portal.repository.record_store import RecordStore
from studio_portal.service import idea as idea_service
from studio_portal.service import roster as roster_service
from studio_portal.service import task as task_service
from studio_portal.template.roster import get_roster_template
from studio_portal.template.task import get_seed_tasks

logger = logging.getLogger(__name__)


class Session:
    """
    One user's view of the studio: a local projection over the gateway.

    Every intent updates the local projection first and then issues a single
    write to the store. A failed write is logged and leaves the projection
    ahead of the store; `diverged` stays set until `refresh()` reloads
    everything from the store. Nothing is retried or rolled back.
    """

    def __init__(
        self,
        user_id: str,
        gateway: PersistenceGateway,
        seed_on_first_use: bool = True,
        default_artists: Optional[list[str]] = None,
    ) -> None:
        self.user_id = user_id
        self.gateway = gateway
        self.seed_on_first_use = seed_on_first_use
        self.default_artists = list(
            default_artists if default_artists is not None else DEFAULT_ARTISTS
        )
        self.records = RecordStore()
        self.diverged = False

    def __write(
        self, description: str, record_id: str, write: Callable[[], object]
    ) -> bool:
        try:
            write()
        except PersistenceError as e:
            logger.error("Error %s %s: %s", description, record_id, e)
            self.diverged = True
            return False
        return True

    def __ensure_loaded(self) -> RecordStore:
        if not self.records.is_hydrated:
            self.load()
        return self.records

    def load(self) -> None:
        """Hydrate the local projection, seeding a brand-new account on the way."""
        tasks = self.gateway.list_tasks(self.user_id)
        if not tasks and self.seed_on_first_use:
            tasks = self.__seed_tasks()
        ideas = self.gateway.list_ideas(self.user_id)
        artists = self.__load_artists()
        self.records.hydrate(tasks, ideas, artists)

    def refresh(self) -> None:
        self.records.clear()
        self.diverged = False
        self.load()

    def __seed_tasks(self) -> list[Task]:
        seed_tasks = get_seed_tasks()
        for task in seed_tasks:
            task["user_id"] = self.user_id
            self.__write(
                "seeding task",
                task["id"],
                lambda task=task: self.gateway.upsert_task(task, self.user_id),
            )
        logger.info("seeded %d starter tasks for %s", len(seed_tasks), self.user_id)
        return seed_tasks

    def __load_artists(self) -> list[str]:
        try:
            roster = self.gateway.get_roster(self.user_id)
        except PersistenceError as e:
            logger.warning("Error loading resources, using defaults: %s", e)
            roster = None

        if roster is None or not roster["list"]:
            roster = get_roster_template(self.user_id, self.default_artists)
            self.__write(
                "seeding resources",
                roster["id"],
                lambda: self.gateway.upsert_roster(roster),
            )
        return roster["list"]

    @property
    def tasks(self) -> list[Task]:
        return self.__ensure_loaded().get_all_tasks()

    @property
    def ideas(self) -> list[Idea]:
        return self.__ensure_loaded().get_all_ideas()

    @property
    def artists(self) -> list[str]:
        return self.__ensure_loaded().get_all_artists()

    def get_task(self, id: EntityId) -> Task:
        task = self.__ensure_loaded().find_task(id)
        if task is None:
            raise RecordNotFoundError("task", id)
        return task

    def get_idea(self, id: EntityId) -> Idea:
        idea = self.__ensure_loaded().find_idea(id)
        if idea is None:
            raise RecordNotFoundError("idea", id)
        return idea

    def save_task(self, draft: TaskDraft) -> Optional[Task]:
        if draft["kind"] == "social":
            return self.save_social_task(draft)
        return self.save_project_task(draft)

    def save_project_task(self, draft: ProjectTaskDraft) -> Optional[Task]:
        """
        Create or replace a project task from its form.

        Returns None, touching nothing, when the form is incomplete. A draft
        promoted from an idea deletes that idea once the task is stored.
        """
        task = task_service.build_project_task(draft)
        if task is None:
            return None
        saved = self.__put_task(task)
        if saved and draft["source_idea_id"] is not None:
            self.delete_idea(draft["source_idea_id"])
        return task

    def save_social_task(self, draft: SocialTaskDraft) -> Optional[Task]:
        task = task_service.build_social_task(draft)
        if task is None:
            return None
        self.__put_task(task)
        return task

    def __put_task(self, task: Task) -> bool:
        task["user_id"] = self.user_id
        self.__ensure_loaded().put_task(task)
        return self.__write(
            "saving task",
            task["id"],
            lambda: self.gateway.upsert_task(task, self.user_id),
        )

    def update_progress(
        self, task_id: EntityId, phase_id: EntityId, progress: int
    ) -> Task:
        updated_task = task_service.update_phase_progress(
            self.get_task(task_id), phase_id, progress
        )
        self.__put_task(updated_task)
        return updated_task

    def delete_task(self, id: EntityId) -> None:
        self.__ensure_loaded().remove_task(id)
        self.__write(
            "deleting task", id, lambda: self.gateway.delete_task(id, self.user_id)
        )

    def add_idea(self, title: str, description: str = "") -> Idea:
        idea = idea_service.new_idea(title, description)
        self.__put_idea(idea)
        return idea

    def update_idea(
        self,
        id: EntityId,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Idea:
        idea = idea_service.edit_idea(self.get_idea(id), title, description)
        self.__put_idea(idea)
        return idea

    def move_idea(self, id: EntityId, direction: int) -> Optional[Idea]:
        """Returns None, touching nothing, when the idea is already at that end."""
        idea = idea_service.move_idea_stage(self.get_idea(id), direction)
        if idea is None:
            return None
        self.__put_idea(idea)
        return idea

    def delete_idea(self, id: EntityId) -> None:
        self.__ensure_loaded().remove_idea(id)
        self.__write(
            "deleting idea", id, lambda: self.gateway.delete_idea(id, self.user_id)
        )

    def promote_idea(self, id: EntityId) -> ProjectTaskDraft:
        """Prefill a project-task form from a ready idea; the idea stays until saved."""
        return idea_service.promote_idea(self.get_idea(id), self.artists)

    def __put_idea(self, idea: Idea) -> None:
        idea["user_id"] = self.user_id
        self.__ensure_loaded().put_idea(idea)
        self.__write(
            "saving idea",
            idea["id"],
            lambda: self.gateway.upsert_idea(idea, self.user_id),
        )

    def add_artist(self, name: str) -> bool:
        """Returns False when the name is already on the roster."""
        artists = roster_service.add_artist(self.artists, name)
        if artists is None:
            return False
        self.records.set_all_artists(artists)
        roster = get_roster_template(self.user_id, artists)
        self.__write(
            "saving resource",
            name,
            lambda: self.gateway.upsert_roster(roster),
        )
        return True
