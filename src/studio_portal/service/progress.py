# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from studio_portal.errors import RecordNotFoundError
from studio_portal.model.entity_id import EntityId
from studio_portal.model.task import Task
from studio_portal.service.session import Session

PROGRESS_STEP = 10


class ActivePhase(TypedDict):
    task_id: EntityId
    phase_id: EntityId
    progress: int


def is_valid_progress(value: int) -> bool:
    return 0 <= value <= 100 and value % PROGRESS_STEP == 0


class PhaseProgressEditor:
    """
    Edits the progress of one phase at a time.

    Selecting a phase replaces any previous selection. Every change is
    committed to the session immediately; there is no separate save.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.active: Optional[ActivePhase] = None

    def select(self, task_id: EntityId, phase_id: EntityId) -> int:
        task = self.session.get_task(task_id)
        for phase in task["phases"]:
            if phase["id"] == phase_id:
                self.active = {
                    "task_id": task_id,
                    "phase_id": phase_id,
                    "progress": phase["progress"],
                }
                return phase["progress"]
        raise RecordNotFoundError("phase", phase_id)

    def change(self, value: int) -> Task:
        if self.active is None:
            raise ValueError("no phase selected")
        if not is_valid_progress(value):
            raise ValueError(
                f"progress must be 0-100 in steps of {PROGRESS_STEP}, got {value}"
            )
        task = self.session.update_progress(
            self.active["task_id"], self.active["phase_id"], value
        )
        self.active["progress"] = value
        return task

    def close(self) -> None:
        self.active = None
