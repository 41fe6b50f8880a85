# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from studio_portal.view.header import header


def roster_view(user_id: str, artists: list[str], workload: dict[str, int]) -> None:
    header(user_id, "resources")

    table = Table(box=box.SIMPLE)
    table.add_column("resource")
    table.add_column("tasks", justify="right")
    for artist in artists:
        table.add_row(escape(artist), str(workload.get(artist, 0)))

    console = Console()
    console.print(table)
