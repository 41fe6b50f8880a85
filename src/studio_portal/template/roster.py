# SPDX-License-Identifier: MIT

from studio_portal.model.roster import ROSTER_ID, Roster


def get_roster_template(user_id: str, artists: list[str]) -> Roster:
    return {"id": ROSTER_ID, "user_id": user_id, "list": list(artists)}
