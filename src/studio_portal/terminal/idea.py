# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from studio_portal.model.entity_id import short_id
from studio_portal.terminal.custom_typer import AliasedTyperGroup
from studio_portal.terminal.parse import DATE_HELP, parse_date, parse_phases
from studio_portal.terminal.session import (
    known_records,
    lookup_idea,
    open_session,
    warn_if_diverged,
)
from studio_portal.time import date_for_input
from studio_portal.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    description: Annotated[str, typer.Option("--description", "-d")] = "",
) -> None:
    """Drop an idea into the inbox."""
    session = open_session()
    idea = session.add_idea(title, description)
    warn_if_diverged(session)

    console = Console()
    label = escape(idea["title"])
    console.print(f"Added idea [bold]{label}[/bold] ({short_id(idea['id'])})")


@app.command("edit, e", no_args_is_help=True)
def edit(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
) -> None:
    session = open_session()
    idea_id = lookup_idea(session, id)["id"]
    with known_records():
        idea = session.update_idea(idea_id, title, description)
    warn_if_diverged(session)

    console = Console()
    label = escape(idea["title"])
    console.print(f"Updated idea [bold]{label}[/bold] ({short_id(idea['id'])})")


@app.command("move, m", no_args_is_help=True)
def move(
    id: str,
    back: Annotated[
        bool,
        typer.Option("--back", "-b", help="Move one stage back instead of forward"),
    ] = False,
) -> None:
    """Move an idea through inbox, developing and ready."""
    session = open_session()
    idea_id = lookup_idea(session, id)["id"]

    with known_records():
        idea = session.move_idea(idea_id, -1 if back else 1)
    console = Console()
    if idea is None:
        stage = lookup_idea(session, idea_id)["stage"]
        console.print(f"[yellow]Idea is already in {stage}[/yellow]")
        return
    warn_if_diverged(session)

    console.print(f"[bold]{escape(idea['title'])}[/bold] moved to {idea['stage']}")


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    session = open_session()
    idea = lookup_idea(session, id)
    session.delete_idea(idea["id"])
    warn_if_diverged(session)

    console = Console()
    label = escape(idea["title"])
    console.print(f"Deleted idea [bold]{label}[/bold] ({short_id(idea['id'])})")


@app.command("promote, p", no_args_is_help=True)
def promote(
    id: str,
    artist: Annotated[Optional[str], typer.Option("--artist", "-a")] = None,
    folder_url: Annotated[Optional[str], typer.Option("--folder", "-f")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    deadline: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--deadline", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    phases: Annotated[
        Optional[list[str]],
        typer.Option(
            "--phase", "-p", help="NAME[:DATE[:PROGRESS]], accepts multiple"
        ),
    ] = None,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Save without asking")
    ] = False,
) -> None:
    """
    Turn a ready idea into a project task.

    The idea is removed only once the task is saved; declining the prompt
    leaves it in the pipeline.
    """
    session = open_session()
    idea_id = lookup_idea(session, id)["id"]
    try:
        with known_records():
            draft = session.promote_idea(idea_id)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if artist is not None:
        draft["artist"] = artist
    if folder_url is not None:
        draft["folder_url"] = folder_url
    if start is not None:
        draft["start_date"] = date_for_input(start)
    if deadline is not None:
        draft["deadline"] = date_for_input(deadline)
    if phases:
        draft["phases"] = parse_phases(phases)

    console = Console()
    if not yes and not typer.confirm(
        f"Create project task '{draft['task_name']}' for {draft['artist']}?"
    ):
        console.print("Idea kept in the pipeline")
        return

    task = session.save_project_task(draft)
    if task is None:
        raise typer.BadParameter("A project task needs a name and a start date")
    warn_if_diverged(session)

    task_report.single_task_view(session.user_id, task)
