# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from studio_portal.view.state import get_show_header


def header(user_id: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the signed-in user.

    Args:
        user_id: The user whose records are shown
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"

    print(Padding("[hot_pink]studio[/hot_pink] [dim]portal[/dim]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(f"[plum1]{escape(user_id)}[/plum1]", (0, 1)))
