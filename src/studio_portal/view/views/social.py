# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from studio_portal.model.task import Task
from studio_portal.view.header import header
from studio_portal.view.util import deadline_label, display_id, progress_bar


def social_view(
    user_id: str, in_production: list[Task], ready_to_post: list[Task]
) -> None:
    header(user_id, "social media")

    console = Console()
    console.print(
        _social_table("In Production", in_production, "No active social tasks.")
    )
    console.print(_social_table("Ready to Post", ready_to_post, "Nothing ready yet."))


def _social_table(title: str, tasks: list[Task], empty_message: str) -> Table:
    table = Table(title=f"{title} ({len(tasks)})", box=box.SIMPLE, title_justify="left")
    table.add_column("id")
    table.add_column("platform")
    table.add_column("asset")
    table.add_column("artist")
    table.add_column("due")
    table.add_column("progress")

    for task in sorted(tasks, key=lambda task: task["deadline"]):
        table.add_row(
            display_id(task),
            task.get("platform", ""),
            escape(task["name"]),
            escape(task["artist"]),
            deadline_label(task),
            progress_bar(task["phases"][0]["progress"]),
        )
    if not tasks:
        table.add_row("", "", f"[dim]{empty_message}[/dim]", "", "", "")
    return table
