# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from studio_portal.model.entity_id import short_id
from studio_portal.service.brief import export_brief
from studio_portal.service.progress import PhaseProgressEditor
from studio_portal.template.draft import (
    get_project_task_draft_template,
    project_task_draft_from_task,
)
from studio_portal.terminal.custom_typer import AliasedTyperGroup
from studio_portal.terminal.parse import (
    DATE_HELP,
    parse_date,
    parse_phases,
    resolve_phase_id,
)
from studio_portal.terminal.session import (
    known_records,
    lookup_task,
    open_session,
    warn_if_diverged,
)
from studio_portal.terminal.validate import validate_progress
from studio_portal.time import date_for_input
from studio_portal.view.util import progress_bar
from studio_portal.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

PHASE_HELP = "NAME[:DATE[:PROGRESS]], accepts multiple phase options in order"


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    artist: Annotated[Optional[str], typer.Option("--artist", "-a")] = None,
    briefing: Annotated[Optional[str], typer.Option("--brief", "-b")] = None,
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
        typer.Option("--phase", "-p", help=PHASE_HELP),
    ] = None,
) -> None:
    """Add a project task."""
    session = open_session()

    draft = get_project_task_draft_template(session.artists)
    draft["task_name"] = name
    if artist is not None:
        draft["artist"] = artist
    if briefing is not None:
        draft["briefing"] = briefing
    if folder_url is not None:
        draft["folder_url"] = folder_url
    if start is not None:
        draft["start_date"] = date_for_input(start)
    if deadline is not None:
        draft["deadline"] = date_for_input(deadline)
    if phases:
        draft["phases"] = parse_phases(phases)

    task = session.save_project_task(draft)
    if task is None:
        raise typer.BadParameter("A project task needs a name and a start date")
    warn_if_diverged(session)

    task_report.single_task_view(session.user_id, task)


@app.command("edit, e", no_args_is_help=True)
def edit(
    id: str,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    artist: Annotated[Optional[str], typer.Option("--artist", "-a")] = None,
    briefing: Annotated[Optional[str], typer.Option("--brief", "-b")] = None,
    folder_url: Annotated[Optional[str], typer.Option("--folder", "-f")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    deadline: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--deadline", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    remove_deadline: Annotated[
        bool,
        typer.Option(
            "--remove-deadline", help="Let the last phase determine the deadline"
        ),
    ] = False,
    phases: Annotated[
        Optional[list[str]],
        typer.Option("--phase", "-p", help=PHASE_HELP + "; replaces all phases"),
    ] = None,
) -> None:
    """Edit a project task; every phase keeps its progress unless replaced."""
    session = open_session()
    task = lookup_task(session, id)
    if task["type"] == "social":
        raise typer.BadParameter("Use `studio social edit` for social assets")

    draft = project_task_draft_from_task(task)
    if name is not None:
        draft["task_name"] = name
    if artist is not None:
        draft["artist"] = artist
    if briefing is not None:
        draft["briefing"] = briefing
    if folder_url is not None:
        draft["folder_url"] = folder_url
    if start is not None:
        draft["start_date"] = date_for_input(start)
    if deadline is not None:
        draft["deadline"] = date_for_input(deadline)
    if remove_deadline:
        draft["deadline"] = ""
    if phases:
        draft["phases"] = parse_phases(phases)

    updated_task = session.save_project_task(draft)
    if updated_task is None:
        raise typer.BadParameter("A project task needs a name and a start date")
    warn_if_diverged(session)

    task_report.single_task_view(session.user_id, updated_task)


@app.command("progress, p", no_args_is_help=True)
def progress(
    id: str,
    phase: Annotated[str, typer.Argument(help="phase position (1, 2, ...) or id")],
    value: Annotated[
        int,
        typer.Argument(callback=validate_progress, help="0-100 in steps of 10"),
    ],
) -> None:
    """Set the progress of one phase of a task."""
    session = open_session()
    task = lookup_task(session, id)

    editor = PhaseProgressEditor(session)
    with known_records():
        previous = editor.select(task["id"], resolve_phase_id(task, phase))
        editor.change(value)
    editor.close()
    warn_if_diverged(session)

    console = Console()
    console.print(f"{progress_bar(previous)} -> {progress_bar(value)}")


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    """Delete a task for good."""
    session = open_session()
    task = lookup_task(session, id)
    session.delete_task(task["id"])
    warn_if_diverged(session)

    console = Console()
    console.print(
        f"Deleted [bold]{escape(task['name'])}[/bold] ({short_id(task['id'])})"
    )


@app.command("show, s", no_args_is_help=True)
def show(id: str) -> None:
    session = open_session()
    task = lookup_task(session, id)
    task_report.single_task_view(session.user_id, task)


@app.command("brief, b", no_args_is_help=True)
def brief(
    id: str,
    export: Annotated[
        Optional[Path],
        typer.Option(
            "--export",
            "-e",
            file_okay=False,
            dir_okay=True,
            exists=True,
            help="Write the briefing to <name>_brief.txt in this directory",
        ),
    ] = None,
) -> None:
    """Show a task's briefing, or export it to a text file."""
    session = open_session()
    task = lookup_task(session, id)

    if export is None:
        task_report.brief_view(session.user_id, task)
        return

    file_path = export_brief(task, export)
    console = Console()
    console.print(f"Exported brief to {escape(str(file_path))}")
