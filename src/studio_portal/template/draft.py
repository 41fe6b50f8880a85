# SPDX-License-Identifier: MIT

from studio_portal.model.draft import PhaseDraft, ProjectTaskDraft, SocialTaskDraft
from studio_portal.model.task import PLATFORMS, SOCIAL_FORMATS, Task
from studio_portal.time import date_for_input, today_local


def get_phase_draft_template(position: int) -> PhaseDraft:
    return {"id": None, "name": f"Phase {position}", "end_date": "", "progress": 0}


def get_project_task_draft_template(artists: list[str]) -> ProjectTaskDraft:
    return {
        "kind": "project",
        "task_id": None,
        "source_idea_id": None,
        "artist": artists[0] if artists else "Artist",
        "task_name": "",
        "briefing": "",
        "folder_url": "",
        "start_date": date_for_input(today_local()),
        "deadline": "",
        "phases": [get_phase_draft_template(1)],
    }


def get_social_task_draft_template(artists: list[str]) -> SocialTaskDraft:
    return {
        "kind": "social",
        "task_id": None,
        "name": "",
        "artist": artists[0] if artists else "",
        "platform": PLATFORMS[0],
        "format": SOCIAL_FORMATS[0],
        "briefing": "",
        "folder_url": "",
        "start_date": date_for_input(today_local()),
        "deadline": "",
        "existing_phases": None,
    }


def project_task_draft_from_task(task: Task) -> ProjectTaskDraft:
    return {
        "kind": "project",
        "task_id": task["id"],
        "source_idea_id": None,
        "artist": task["artist"],
        "task_name": task["name"],
        "briefing": task["briefing"],
        "folder_url": task["folder_url"] or "",
        "start_date": date_for_input(task["start_date"]),
        "deadline": date_for_input(task["deadline"]),
        "phases": [
            {
                "id": phase["id"],
                "name": phase["name"],
                "end_date": date_for_input(phase["end_date"]),
                "progress": phase["progress"],
            }
            for phase in task["phases"]
        ],
    }


def social_task_draft_from_task(task: Task) -> SocialTaskDraft:
    """Editing form for a social task; the platform prefix is stripped from the name."""
    platform = task.get("platform") or PLATFORMS[0]
    name = task["name"]
    prefix = f"{platform}: "
    if name.startswith(prefix):
        name = name[len(prefix) :]
    return {
        "kind": "social",
        "task_id": task["id"],
        "name": name,
        "artist": task["artist"],
        "platform": platform,
        "format": task.get("format") or SOCIAL_FORMATS[0],
        "briefing": task["briefing"],
        "folder_url": task["folder_url"] or "",
        "start_date": date_for_input(task["start_date"]),
        "deadline": date_for_input(task["deadline"]),
        "existing_phases": task["phases"],
    }
