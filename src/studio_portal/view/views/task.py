# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from studio_portal.color import phase_style
from studio_portal.model.entity_id import short_id
from studio_portal.model.task import Task
from studio_portal.time import datetime_to_display_local_date_str
from studio_portal.view.header import header
from studio_portal.view.util import deadline_label, progress_bar


def single_task_view(user_id: str, task: Task) -> None:
    header(user_id, "task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", task["id"])
    task_table.add_row("type", task["type"])
    task_table.add_row("name", escape(task["name"]))
    task_table.add_row("artist", escape(task["artist"]))
    if task["type"] == "social":
        task_table.add_row("platform", task.get("platform", ""))
        task_table.add_row("format", task.get("format", ""))
    task_table.add_row("start", datetime_to_display_local_date_str(task["start_date"]))
    task_table.add_row("deadline", deadline_label(task))
    task_table.add_row("folder", escape(task["folder_url"] or ""))
    task_table.add_row("briefing", escape(task["briefing"] or ""))

    phases_table = Table(box=box.SIMPLE)
    phases_table.add_column("#", justify="right")
    phases_table.add_column("id")
    phases_table.add_column("phase")
    phases_table.add_column("ends")
    phases_table.add_column("progress")
    for index, phase in enumerate(task["phases"], start=1):
        vivid = phase_style(phase["color"])["vivid"]
        phases_table.add_row(
            str(index),
            f"[dim]{short_id(phase['id'])}[/dim]",
            f"[{vivid}]■[/{vivid}] {escape(phase['name'])}",
            datetime_to_display_local_date_str(phase["end_date"]),
            progress_bar(phase["progress"]),
        )

    console = Console()
    console.print(task_table)
    console.print(phases_table)


def brief_view(user_id: str, task: Task) -> None:
    header(user_id, "brief")

    body = "[dim]No briefing provided.[/dim]"
    if task["briefing"]:
        body = escape(task["briefing"])

    console = Console()
    console.print(
        Panel(
            body,
            title=escape(task["name"]),
            subtitle=escape(task["folder_url"]) if task["folder_url"] else None,
            box=box.ROUNDED,
        )
    )
