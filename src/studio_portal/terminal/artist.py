# SPDX-License-Identifier: MIT

import typer
from rich.console import Console
from rich.markup import escape

from studio_portal.service.dashboard import workload
from studio_portal.terminal.custom_typer import AliasedTyperGroup
from studio_portal.terminal.session import open_session, warn_if_diverged
from studio_portal.view.views import roster as roster_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(name: str) -> None:
    """Add an artist to the resource roster."""
    if not name:
        raise typer.BadParameter("Artist name cannot be empty")

    session = open_session()
    if not session.add_artist(name):
        raise typer.BadParameter(f"{name!r} is already on the roster")
    warn_if_diverged(session)

    console = Console()
    console.print(f"Added [bold]{escape(name)}[/bold] to the roster")


@app.command("list, l")
def list_artists() -> None:
    session = open_session()
    roster_report.roster_view(session.user_id, session.artists, workload(session.tasks))
