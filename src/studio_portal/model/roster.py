# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

ROSTER_ID = "artists"


class Roster(TypedDict):
    id: str
    user_id: Optional[str]
    list: list[str]
