# SPDX-License-Identifier: MIT

from rich.markup import escape

from studio_portal.color import OVERDUE_COLOR, SOCIAL_COLOR
from studio_portal.model.entity_id import short_id
from studio_portal.model.task import Task
from studio_portal.service.dashboard import is_task_overdue
from studio_portal.time import datetime_to_display_local_date_str


def progress_bar(progress: int, width: int = 10) -> str:
    filled = round(progress / 100 * width)
    bar = f"[green3]{'█' * filled}[/green3][grey35]{'░' * (width - filled)}[/grey35]"
    return f"{bar} {progress:>3}%"


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    if width <= 1:
        return text[:width]
    return text[: width - 1] + "…"


def task_label(task: Task) -> str:
    if task["type"] == "social":
        return f"[{SOCIAL_COLOR}]◆[/{SOCIAL_COLOR}] {escape(task['name'])}"
    return escape(task["name"])


def deadline_label(task: Task) -> str:
    label = datetime_to_display_local_date_str(task["deadline"])
    if is_task_overdue(task):
        return f"[{OVERDUE_COLOR}]{label}[/{OVERDUE_COLOR}]"
    return label


def display_id(task: Task) -> str:
    return f"[dim]{short_id(task['id'])}[/dim]"
