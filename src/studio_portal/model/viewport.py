# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from studio_portal.geometry import SpanPosition
from studio_portal.model.entity_id import EntityId
from studio_portal.model.task import PhaseColor, Task


class Viewport(TypedDict):
    start: pendulum.DateTime
    days: int


class PhaseSpan(TypedDict):
    phase_id: EntityId
    name: str
    color: PhaseColor
    progress: int
    start: pendulum.DateTime
    end: pendulum.DateTime
    position: SpanPosition


class TaskRow(TypedDict):
    task: Task
    spans: list[PhaseSpan]


class ArtistGroup(TypedDict):
    artist: str
    rows: list[TaskRow]


class TimelineLayout(TypedDict):
    viewport: Viewport
    days: list[pendulum.DateTime]
    groups: list[ArtistGroup]
    today: Optional[SpanPosition]
