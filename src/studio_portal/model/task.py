# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, Optional, TypeAlias, TypedDict

import pendulum

from studio_portal.model.entity_id import EntityId

TaskType: TypeAlias = Literal["project", "social"]
PhaseColor: TypeAlias = Literal["green", "yellow", "red", "blue", "orange", "purple", "social"]

UNASSIGNED_ARTIST = "Unassigned"

PLATFORMS = ["Instagram", "TikTok", "YouTube", "Twitter/X", "LinkedIn"]
SOCIAL_FORMATS = ["Animation", "Static Image", "Video Edit", "Carousel"]


class Phase(TypedDict):
    id: EntityId
    name: str
    end_date: pendulum.DateTime
    progress: int
    color: PhaseColor


class Task(TypedDict):
    id: EntityId
    user_id: Optional[str]
    type: TaskType
    artist: str
    name: str
    briefing: str
    folder_url: str
    start_date: pendulum.DateTime
    deadline: pendulum.DateTime
    platform: NotRequired[str]
    format: NotRequired[str]
    phases: list[Phase]
