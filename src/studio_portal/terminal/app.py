# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from studio_portal.errors import StudioError
from studio_portal.terminal import artist, configuration, idea, social, task, view
from studio_portal.terminal.custom_typer import StudioTyperGroup
from studio_portal.terminal.session import open_session, warn_if_diverged
from studio_portal.view import state as view_state

app = typer.Typer(
    cls=StudioTyperGroup,
    help="Studio Portal - creative production tracking in the CLI",
    no_args_is_help=True,
)
app.add_typer(view.app, name="view, v")
app.add_typer(task.app, name="task, t")
app.add_typer(social.app, name="social, so")
app.add_typer(idea.app, name="idea, i")
app.add_typer(artist.app, name="artist, ar")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    Studio Portal - creative production tracking in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


@app.command("refresh, r")
def refresh() -> None:
    """Discard local state and reload every record from the store."""
    session = open_session()
    session.refresh()
    warn_if_diverged(session)

    console = Console()
    console.print(
        f"Reloaded {len(session.tasks)} tasks, {len(session.ideas)} ideas "
        f"and {len(session.artists)} artists"
    )


def run() -> None:
    try:
        app()
    except StudioError as e:
        Console(stderr=True).print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
