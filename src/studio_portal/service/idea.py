# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from studio_portal.model.draft import ProjectTaskDraft
from studio_portal.model.idea import IDEA_STAGES, Idea
from studio_portal.template.draft import get_project_task_draft_template
from studio_portal.template.idea import get_idea_template


def new_idea(title: str, description: str) -> Idea:
    idea = get_idea_template()
    idea["title"] = title
    idea["description"] = description
    return idea


def edit_idea(
    idea: Idea, title: Optional[str] = None, description: Optional[str] = None
) -> Idea:
    edited_idea = deepcopy(idea)
    if title is not None:
        edited_idea["title"] = title
    if description is not None:
        edited_idea["description"] = description
    return edited_idea


def move_idea_stage(idea: Idea, direction: int) -> Optional[Idea]:
    """
    Move an idea one stage forward (+1) or back (-1).

    Returns None when the move would leave the inbox/developing/ready
    pipeline; the idea is then left where it is.
    """
    if direction not in (-1, 1):
        raise ValueError(f"ideas move one stage at a time, got {direction}")

    index = IDEA_STAGES.index(idea["stage"]) + direction
    if index < 0 or index >= len(IDEA_STAGES):
        return None

    moved_idea = deepcopy(idea)
    moved_idea["stage"] = IDEA_STAGES[index]
    return moved_idea


def promote_idea(idea: Idea, artists: list[str]) -> ProjectTaskDraft:
    """
    Prefill a project-task form from a ready idea.

    The idea is only consumed once the resulting task is saved; the draft
    carries its id for that purpose.
    """
    if idea["stage"] != "ready":
        raise ValueError(f"only ready ideas can be promoted, not {idea['stage']}")

    draft = get_project_task_draft_template(artists)
    draft["task_name"] = idea["title"]
    draft["briefing"] = idea["description"]
    draft["source_idea_id"] = idea["id"]
    return draft
