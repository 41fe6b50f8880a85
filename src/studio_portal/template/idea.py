# SPDX-License-Identifier: MIT

from studio_portal.model.entity_id import generate_entity_id
from studio_portal.model.idea import Idea
from studio_portal.time import now_local


def get_idea_template() -> Idea:
    return {
        "id": generate_entity_id(),
        "user_id": None,
        "title": "",
        "description": "",
        "stage": "inbox",
        "created_at": now_local(),
    }
