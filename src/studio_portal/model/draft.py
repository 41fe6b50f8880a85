# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

from studio_portal.model.entity_id import EntityId
from studio_portal.model.task import Phase


class PhaseDraft(TypedDict):
    id: Optional[EntityId]
    name: str
    end_date: str
    progress: int


class ProjectTaskDraft(TypedDict):
    """Form state for creating or editing a project task. Dates are 'YYYY-MM-DD' or ''."""

    kind: Literal["project"]
    task_id: Optional[EntityId]
    source_idea_id: Optional[EntityId]
    artist: str
    task_name: str
    briefing: str
    folder_url: str
    start_date: str
    deadline: str
    phases: list[PhaseDraft]


class SocialTaskDraft(TypedDict):
    """Form state for requesting or editing a social asset."""

    kind: Literal["social"]
    task_id: Optional[EntityId]
    name: str
    artist: str
    platform: str
    format: str
    briefing: str
    folder_url: str
    start_date: str
    deadline: str
    existing_phases: Optional[list[Phase]]


TaskDraft: TypeAlias = ProjectTaskDraft | SocialTaskDraft
