# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from studio_portal.model.idea import IDEA_STAGES, Idea, IdeaStage
from studio_portal.model.task import UNASSIGNED_ARTIST, Task
from studio_portal.time import now_local


class DashboardSummary(TypedDict):
    total: int
    completed: int
    social_count: int
    project_count: int
    due_this_week: list[Task]
    workload: dict[str, int]


def is_task_completed(task: Task) -> bool:
    """A task is complete once its last phase reaches 100%."""
    if not task["phases"]:
        return False
    return task["phases"][-1]["progress"] == 100


def is_task_overdue(task: Task, now: Optional[pendulum.DateTime] = None) -> bool:
    if now is None:
        now = now_local()
    return task["deadline"] < now


def tasks_due_this_week(
    tasks: list[Task], now: Optional[pendulum.DateTime] = None
) -> list[Task]:
    """Tasks whose deadline falls strictly between now and seven days from now."""
    if now is None:
        now = now_local()
    week_end = now.add(days=7)
    return [task for task in tasks if now < task["deadline"] < week_end]


def workload(tasks: list[Task]) -> dict[str, int]:
    """Number of tasks per artist, projects and social assets combined."""
    load: dict[str, int] = {}
    for task in tasks:
        artist = task["artist"] or UNASSIGNED_ARTIST
        load[artist] = load.get(artist, 0) + 1
    return load


def dashboard_summary(
    tasks: list[Task], now: Optional[pendulum.DateTime] = None
) -> DashboardSummary:
    social_count = len([task for task in tasks if task["type"] == "social"])
    return {
        "total": len(tasks),
        "completed": len([task for task in tasks if is_task_completed(task)]),
        "social_count": social_count,
        "project_count": len(tasks) - social_count,
        "due_this_week": tasks_due_this_week(tasks, now),
        "workload": workload(tasks),
    }


def social_board(tasks: list[Task]) -> tuple[list[Task], list[Task]]:
    """Split social assets into (in production, ready to post) by first-phase progress."""
    social_tasks = [
        task for task in tasks if task["type"] == "social" and task["phases"]
    ]
    in_production = [
        task for task in social_tasks if task["phases"][0]["progress"] < 100
    ]
    ready_to_post = [
        task for task in social_tasks if task["phases"][0]["progress"] == 100
    ]
    return in_production, ready_to_post


def pipeline_columns(ideas: list[Idea]) -> dict[IdeaStage, list[Idea]]:
    columns: dict[IdeaStage, list[Idea]] = {stage: [] for stage in IDEA_STAGES}
    for idea in ideas:
        columns[idea["stage"]].append(idea)
    return columns
