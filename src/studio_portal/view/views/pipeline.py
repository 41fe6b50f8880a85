# SPDX-License-Identifier: MIT

from itertools import zip_longest

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from studio_portal.model.entity_id import short_id
from studio_portal.model.idea import Idea, IdeaStage
from studio_portal.view.header import header
from studio_portal.view.util import truncate

COLUMN_TITLES: dict[IdeaStage, str] = {
    "inbox": "Inbox",
    "developing": "Developing",
    "ready": "Ready",
}


def pipeline_view(user_id: str, columns: dict[IdeaStage, list[Idea]]) -> None:
    header(user_id, "idea lab")

    table = Table(box=box.ROUNDED, expand=True, show_lines=True)
    for stage, ideas in columns.items():
        table.add_column(f"{COLUMN_TITLES[stage]} ({len(ideas)})", ratio=1)

    for row in zip_longest(*columns.values()):
        table.add_row(*[_idea_cell(idea) if idea is not None else "" for idea in row])

    console = Console()
    console.print(table)


def _idea_cell(idea: Idea) -> str:
    cell = f"[dim]{short_id(idea['id'])}[/dim] [bold]{escape(idea['title'])}[/bold]"
    if idea["description"]:
        cell += f"\n[grey62]{escape(truncate(idea['description'], 80))}[/grey62]"
    return cell
