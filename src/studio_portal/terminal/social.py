# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from studio_portal.model.task import PLATFORMS, SOCIAL_FORMATS
from studio_portal.service.progress import PhaseProgressEditor
from studio_portal.template.draft import (
    get_social_task_draft_template,
    social_task_draft_from_task,
)
from studio_portal.terminal.custom_typer import AliasedTyperGroup
from studio_portal.terminal.parse import DATE_HELP, parse_date
from studio_portal.terminal.session import (
    known_records,
    lookup_task,
    open_session,
    warn_if_diverged,
)
from studio_portal.terminal.validate import (
    validate_format,
    validate_platform,
    validate_progress,
)
from studio_portal.time import date_for_input
from studio_portal.view.util import progress_bar
from studio_portal.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

PLATFORM_HELP = f"valid input: {', '.join(PLATFORMS)}"
FORMAT_HELP = f"valid input: {', '.join(SOCIAL_FORMATS)}"


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    deadline: Annotated[
        pendulum.DateTime,
        typer.Option("--deadline", "-d", parser=parse_date, help=DATE_HELP),
    ],
    platform: Annotated[
        Optional[str],
        typer.Option(
            "--platform", "-p", callback=validate_platform, help=PLATFORM_HELP
        ),
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-fo", callback=validate_format, help=FORMAT_HELP),
    ] = None,
    artist: Annotated[Optional[str], typer.Option("--artist", "-a")] = None,
    briefing: Annotated[Optional[str], typer.Option("--brief", "-b")] = None,
    folder_url: Annotated[Optional[str], typer.Option("--folder", "-f")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Request a social media asset."""
    session = open_session()

    draft = get_social_task_draft_template(session.artists)
    draft["name"] = name
    draft["deadline"] = date_for_input(deadline)
    if platform is not None:
        draft["platform"] = platform
    if format is not None:
        draft["format"] = format
    if artist is not None:
        draft["artist"] = artist
    if briefing is not None:
        draft["briefing"] = briefing
    if folder_url is not None:
        draft["folder_url"] = folder_url
    if start is not None:
        draft["start_date"] = date_for_input(start)

    task = session.save_social_task(draft)
    if task is None:
        raise typer.BadParameter(
            "A social asset needs a name, an artist and a deadline"
        )
    warn_if_diverged(session)

    task_report.single_task_view(session.user_id, task)


@app.command("edit, e", no_args_is_help=True)
def edit(
    id: str,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    deadline: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--deadline", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    platform: Annotated[
        Optional[str],
        typer.Option(
            "--platform", "-p", callback=validate_platform, help=PLATFORM_HELP
        ),
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-fo", callback=validate_format, help=FORMAT_HELP),
    ] = None,
    artist: Annotated[Optional[str], typer.Option("--artist", "-a")] = None,
    briefing: Annotated[Optional[str], typer.Option("--brief", "-b")] = None,
    folder_url: Annotated[Optional[str], typer.Option("--folder", "-f")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Edit a social asset; its production phase moves with the deadline."""
    session = open_session()
    task = lookup_task(session, id)
    if task["type"] != "social":
        raise typer.BadParameter("Use `studio task edit` for project tasks")

    draft = social_task_draft_from_task(task)
    if name is not None:
        draft["name"] = name
    if deadline is not None:
        draft["deadline"] = date_for_input(deadline)
    if platform is not None:
        draft["platform"] = platform
    if format is not None:
        draft["format"] = format
    if artist is not None:
        draft["artist"] = artist
    if briefing is not None:
        draft["briefing"] = briefing
    if folder_url is not None:
        draft["folder_url"] = folder_url
    if start is not None:
        draft["start_date"] = date_for_input(start)

    updated_task = session.save_social_task(draft)
    if updated_task is None:
        raise typer.BadParameter(
            "A social asset needs a name, an artist and a deadline"
        )
    warn_if_diverged(session)

    task_report.single_task_view(session.user_id, updated_task)


@app.command("progress, p", no_args_is_help=True)
def progress(
    id: str,
    value: Annotated[
        int,
        typer.Argument(callback=validate_progress, help="0-100 in steps of 10"),
    ],
) -> None:
    """Set the production progress of a social asset; 100 marks it ready to post."""
    session = open_session()
    task = lookup_task(session, id)
    if task["type"] != "social" or not task["phases"]:
        raise typer.BadParameter("Use `studio task progress` for project tasks")

    editor = PhaseProgressEditor(session)
    with known_records():
        previous = editor.select(task["id"], task["phases"][0]["id"])
        editor.change(value)
    editor.close()
    warn_if_diverged(session)

    console = Console()
    console.print(f"{progress_bar(previous)} -> {progress_bar(value)}")
    if value == 100:
        console.print("[green]Ready to post[/green]")
