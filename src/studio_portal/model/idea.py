# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

import pendulum

from studio_portal.model.entity_id import EntityId

IdeaStage: TypeAlias = Literal["inbox", "developing", "ready"]

IDEA_STAGES: list[IdeaStage] = ["inbox", "developing", "ready"]


class Idea(TypedDict):
    id: EntityId
    user_id: Optional[str]
    title: str
    description: str
    stage: IdeaStage
    created_at: pendulum.DateTime
