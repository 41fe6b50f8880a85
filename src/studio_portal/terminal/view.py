# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from studio_portal.model.viewport import Viewport
from studio_portal.repository.configuration import CONFIGURATION_REPO
from studio_portal.repository.viewport import VIEWPORT_REPO
from studio_portal.service.dashboard import (
    dashboard_summary,
    pipeline_columns,
    social_board,
)
from studio_portal.service.strategy import RETAIL_CYCLES
from studio_portal.service.timeline import (
    default_viewport,
    layout_timeline,
    step_viewport,
)
from studio_portal.terminal.custom_typer import AliasedTyperGroup
from studio_portal.terminal.session import open_session
from studio_portal.terminal.validate import validate_positive
from studio_portal.view.views import dashboard as dashboard_report
from studio_portal.view.views import pipeline as pipeline_report
from studio_portal.view.views import social as social_report
from studio_portal.view.views import strategy as strategy_report
from studio_portal.view.views import timeline as timeline_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("dashboard, d")
def dashboard() -> None:
    """Task totals, workload per artist and this week's deadlines."""
    session = open_session()
    dashboard_report.dashboard_view(session.user_id, dashboard_summary(session.tasks))


@app.command("timeline, t")
def timeline(
    next: Annotated[
        int,
        typer.Option("--next", "-n", count=True, help="Slide forward one step"),
    ] = 0,
    prev: Annotated[
        int,
        typer.Option("--prev", "-p", count=True, help="Slide back one step"),
    ] = 0,
    reset: Annotated[
        bool, typer.Option("--reset", "-r", help="Return to the default window")
    ] = False,
    cycles: Annotated[
        bool, typer.Option("--cycles", "-c", help="Overlay the retail cycles")
    ] = False,
    days: Annotated[
        Optional[int],
        typer.Option("--days", callback=validate_positive, help="Width in days"),
    ] = None,
) -> None:
    """
    Tasks grouped by artist on a day-by-day timeline.

    The window position is remembered between invocations; repeat -n or -p
    to slide several steps at once.
    """
    session = open_session()
    config = CONFIGURATION_REPO.get_config()

    window_days = days if days is not None else config["timeline_days"]
    stored_start = None if reset else VIEWPORT_REPO.get_start()
    if reset:
        VIEWPORT_REPO.clear()

    viewport: Viewport
    if stored_start is None:
        viewport = default_viewport(window_days, config["timeline_offset_days"])
    else:
        viewport = {"start": stored_start, "days": window_days}

    steps = next - prev
    if steps != 0:
        viewport = step_viewport(viewport, steps, config["timeline_step_days"])
        VIEWPORT_REPO.set_start(viewport["start"])

    timeline_report.timeline_view(
        session.user_id, layout_timeline(session.tasks, viewport), show_cycles=cycles
    )


@app.command("social, so")
def social() -> None:
    """Social assets in production and ready to post."""
    session = open_session()
    in_production, ready_to_post = social_board(session.tasks)
    social_report.social_view(session.user_id, in_production, ready_to_post)


@app.command("pipeline, p")
def pipeline() -> None:
    """The idea lab: inbox, developing and ready."""
    session = open_session()
    pipeline_report.pipeline_view(session.user_id, pipeline_columns(session.ideas))


@app.command("strategy, st")
def strategy() -> None:
    """The yearly retail cycles and their target dates."""
    config = CONFIGURATION_REPO.get_config()
    strategy_report.strategy_view(config["user_id"], RETAIL_CYCLES)
