# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from studio_portal.service.dashboard import DashboardSummary
from studio_portal.time import datetime_to_display_local_date_str
from studio_portal.view.header import header
from studio_portal.view.util import display_id, task_label


def dashboard_view(user_id: str, summary: DashboardSummary) -> None:
    header(user_id, "dashboard")

    console = Console()

    stats_table = Table(box=box.SIMPLE, show_header=False)
    stats_table.add_column("metric", style="grey62")
    stats_table.add_column("value", style="bold")
    stats_table.add_row("total tasks", str(summary["total"]))
    stats_table.add_row("completed", str(summary["completed"]))
    stats_table.add_row("due this week", str(len(summary["due_this_week"])))
    stats_table.add_row("projects", str(summary["project_count"]))
    stats_table.add_row("social assets", str(summary["social_count"]))
    console.print(stats_table)

    workload_table = Table(title="Workload", box=box.SIMPLE, title_justify="left")
    workload_table.add_column("artist")
    workload_table.add_column("tasks", justify="right")
    workload_table.add_column("")
    for artist, count in summary["workload"].items():
        bar = "▇" * count
        workload_table.add_row(
            escape(artist), str(count), f"[hot_pink]{bar}[/hot_pink]"
        )
    console.print(workload_table)

    urgent_table = Table(title="Urgent Deadlines", box=box.SIMPLE, title_justify="left")
    urgent_table.add_column("id")
    urgent_table.add_column("task")
    urgent_table.add_column("artist")
    urgent_table.add_column("deadline")
    for task in sorted(summary["due_this_week"], key=lambda task: task["deadline"]):
        urgent_table.add_row(
            display_id(task),
            task_label(task),
            escape(task["artist"]),
            f"[red]{datetime_to_display_local_date_str(task['deadline'])}[/red]",
        )
    if not summary["due_this_week"]:
        urgent_table.add_row("", "[dim]nothing due this week[/dim]", "", "")
    console.print(urgent_table)
