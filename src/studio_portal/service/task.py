# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from studio_portal.color import (
    FILLER_PHASE_COLORS,
    LAST_PHASE_COLOR,
    PENULTIMATE_PHASE_COLOR,
    SOCIAL_PHASE_COLOR,
)
from studio_portal.errors import RecordNotFoundError
from studio_portal.model.draft import ProjectTaskDraft, SocialTaskDraft
from studio_portal.model.entity_id import EntityId, generate_entity_id
from studio_portal.model.task import UNASSIGNED_ARTIST, Phase, PhaseColor, Task
from studio_portal.time import normalize_date, today_local

SOCIAL_PHASE_NAME = "Production"


def assign_phase_colors(phase_count: int) -> list[PhaseColor]:
    """
    Colors for phases already sorted by end date.

    The last phase is red, the one before it yellow, and every earlier
    phase cycles through the filler colors by its own index.
    """
    colors: list[PhaseColor] = []
    for index in range(phase_count):
        if index == phase_count - 1:
            colors.append(LAST_PHASE_COLOR)
        elif index == phase_count - 2:
            colors.append(PENULTIMATE_PHASE_COLOR)
        else:
            colors.append(FILLER_PHASE_COLORS[index % len(FILLER_PHASE_COLORS)])
    return colors


def build_project_task(draft: ProjectTaskDraft) -> Optional[Task]:
    """
    Turn a project-task form into a normalized record.

    Returns None when the task name or start date is missing. Phases without
    an end date fall back to the deadline, then to the start date; phases are
    sorted by end date and colored by position; an unset deadline becomes
    the latest phase end.
    """
    if not draft["task_name"] or not draft["start_date"]:
        return None

    fallback_end_date = draft["deadline"] or draft["start_date"]
    valid_phases = [
        {**phase, "end_date": phase["end_date"] or fallback_end_date}
        for phase in draft["phases"]
    ]
    sorted_phases = sorted(
        valid_phases, key=lambda phase: normalize_date(phase["end_date"])
    )
    colors = assign_phase_colors(len(sorted_phases))

    if draft["deadline"]:
        deadline = normalize_date(draft["deadline"])
    elif sorted_phases:
        deadline = normalize_date(sorted_phases[-1]["end_date"])
    else:
        deadline = normalize_date(draft["start_date"])

    phases: list[Phase] = [
        {
            "id": phase["id"] or generate_entity_id(),
            "name": phase["name"],
            "end_date": normalize_date(phase["end_date"]),
            "progress": phase["progress"] or 0,
            "color": colors[index],
        }
        for index, phase in enumerate(sorted_phases)
    ]

    return {
        "id": draft["task_id"] or generate_entity_id(),
        "user_id": None,
        "type": "project",
        "artist": draft["artist"] or UNASSIGNED_ARTIST,
        "name": draft["task_name"],
        "briefing": draft["briefing"],
        "folder_url": draft["folder_url"],
        "start_date": normalize_date(draft["start_date"]),
        "deadline": deadline,
        "phases": phases,
    }


def is_social_draft_complete(draft: SocialTaskDraft) -> bool:
    return bool(draft["name"] and draft["artist"] and draft["deadline"])


def strip_platform_prefix(name: str, platform: str) -> str:
    prefix = f"{platform}: "
    if name.startswith(prefix):
        return name[len(prefix) :]
    return name


def compose_social_name(platform: str, name: str) -> str:
    return f"{platform}: {strip_platform_prefix(name, platform)}"


def build_social_task(draft: SocialTaskDraft) -> Optional[Task]:
    """
    Turn a social-asset form into a normalized record.

    Returns None until name, artist and deadline are all filled in. A new
    asset gets a single "Production" phase ending on the deadline; an edited
    one keeps its phases but the first phase is moved to the deadline.
    """
    if not is_social_draft_complete(draft):
        return None

    start_date = (
        normalize_date(draft["start_date"]) if draft["start_date"] else today_local()
    )
    deadline = normalize_date(draft["deadline"]) if draft["deadline"] else start_date

    if draft["existing_phases"]:
        phases = deepcopy(draft["existing_phases"])
    else:
        phases = [
            {
                "id": generate_entity_id(),
                "name": SOCIAL_PHASE_NAME,
                "end_date": deadline,
                "progress": 0,
                "color": SOCIAL_PHASE_COLOR,
            }
        ]
    phases[0]["end_date"] = deadline

    return {
        "id": draft["task_id"] or generate_entity_id(),
        "user_id": None,
        "type": "social",
        "artist": draft["artist"] or UNASSIGNED_ARTIST,
        "name": compose_social_name(draft["platform"], draft["name"]),
        "briefing": draft["briefing"],
        "folder_url": draft["folder_url"],
        "start_date": start_date,
        "deadline": deadline,
        "platform": draft["platform"],
        "format": draft["format"],
        "phases": phases,
    }


def update_phase_progress(task: Task, phase_id: EntityId, progress: int) -> Task:
    """Return a copy of the task with one phase's progress replaced."""
    if not 0 <= progress <= 100:
        raise ValueError(f"progress must be between 0 and 100, got {progress}")
    if not any(phase["id"] == phase_id for phase in task["phases"]):
        raise RecordNotFoundError("phase", phase_id)

    updated_task = deepcopy(task)
    for phase in updated_task["phases"]:
        if phase["id"] == phase_id:
            phase["progress"] = progress
    return updated_task
