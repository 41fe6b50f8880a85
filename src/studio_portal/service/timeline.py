# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from studio_portal.configuration import (
    DEFAULT_TIMELINE_DAYS,
    DEFAULT_TIMELINE_OFFSET_DAYS,
    DEFAULT_TIMELINE_STEP_DAYS,
)
from studio_portal.geometry import SpanPosition, position_in_window
from studio_portal.model.task import UNASSIGNED_ARTIST, Task
from studio_portal.model.viewport import (
    ArtistGroup,
    PhaseSpan,
    TimelineLayout,
    Viewport,
)
from studio_portal.time import normalize_date, relative_date, today_local


def default_viewport(
    days: int = DEFAULT_TIMELINE_DAYS,
    offset_days: int = DEFAULT_TIMELINE_OFFSET_DAYS,
) -> Viewport:
    """A window of `days` days starting `offset_days` before today."""
    return {"start": relative_date(-offset_days), "days": days}


def step_viewport(
    viewport: Viewport, steps: int, step_days: int = DEFAULT_TIMELINE_STEP_DAYS
) -> Viewport:
    """Slide the window by `steps` increments; negative steps go back in time."""
    return {
        "start": viewport["start"].add(days=steps * step_days),
        "days": viewport["days"],
    }


def viewport_end(viewport: Viewport) -> pendulum.DateTime:
    return normalize_date(viewport["start"]).add(days=viewport["days"])


def calendar_days(viewport: Viewport) -> list[pendulum.DateTime]:
    start = normalize_date(viewport["start"])
    return [start.add(days=offset) for offset in range(viewport["days"])]


def group_tasks_by_artist(tasks: list[Task]) -> list[tuple[str, list[Task]]]:
    """
    Group tasks under their artist.

    Groups are ordered alphabetically with "Unassigned" always last; each
    group's tasks are ordered by start date.
    """
    groups: dict[str, list[Task]] = {}
    for task in tasks:
        artist = task["artist"] or UNASSIGNED_ARTIST
        groups.setdefault(artist, []).append(task)

    sorted_artists = sorted(
        groups.keys(),
        key=lambda artist: (artist == UNASSIGNED_ARTIST, artist.casefold(), artist),
    )
    return [
        (
            artist,
            sorted(
                groups[artist], key=lambda task: normalize_date(task["start_date"])
            ),
        )
        for artist in sorted_artists
    ]


def phase_spans(task: Task, viewport: Viewport) -> list[PhaseSpan]:
    """
    Position every visible phase of a task.

    A phase starts where the previous one ended; the first starts with the
    task. Phases entirely outside the viewport are left out.
    """
    view_end = viewport_end(viewport)
    spans: list[PhaseSpan] = []
    for index, phase in enumerate(task["phases"]):
        phase_start = (
            task["start_date"] if index == 0 else task["phases"][index - 1]["end_date"]
        )
        position = position_in_window(
            phase_start, phase["end_date"], viewport["start"], view_end
        )
        if position is None:
            continue
        spans.append(
            {
                "phase_id": phase["id"],
                "name": phase["name"],
                "color": phase["color"],
                "progress": phase["progress"],
                "start": normalize_date(phase_start),
                "end": normalize_date(phase["end_date"]),
                "position": position,
            }
        )
    return spans


def today_position(
    viewport: Viewport, today: Optional[pendulum.DateTime] = None
) -> Optional[SpanPosition]:
    """Where the "today" marker falls, as a zero-length span."""
    if today is None:
        today = today_local()
    return position_in_window(today, today, viewport["start"], viewport_end(viewport))


def layout_timeline(
    tasks: list[Task],
    viewport: Viewport,
    today: Optional[pendulum.DateTime] = None,
) -> TimelineLayout:
    groups: list[ArtistGroup] = []
    for artist, artist_tasks in group_tasks_by_artist(tasks):
        groups.append(
            {
                "artist": artist,
                "rows": [
                    {"task": task, "spans": phase_spans(task, viewport)}
                    for task in artist_tasks
                ],
            }
        )

    return {
        "viewport": viewport,
        "days": calendar_days(viewport),
        "groups": groups,
        "today": today_position(viewport, today),
    }
