# SPDX-License-Identifier: MIT

from typing import Optional


def add_artist(artists: list[str], name: str) -> Optional[list[str]]:
    """
    Append a name to the roster.

    Returns the new roster, or None when the name is empty or already
    present (exact match, no case or whitespace folding).
    """
    if not name or name in artists:
        return None
    return [*artists, name]
