# SPDX-License-Identifier: MIT

from typing import TypedDict

from studio_portal.model.task import PhaseColor

# Phases before the final two cycle through these by index
FILLER_PHASE_COLORS: list[PhaseColor] = ["green", "blue", "purple", "orange"]
PENULTIMATE_PHASE_COLOR: PhaseColor = "yellow"
LAST_PHASE_COLOR: PhaseColor = "red"
SOCIAL_PHASE_COLOR: PhaseColor = "social"


class PhaseStyle(TypedDict):
    pale: str
    vivid: str


# Rich styles: "vivid" paints the completed share of a phase, "pale" the rest
PHASE_STYLES: dict[PhaseColor, PhaseStyle] = {
    "green": {"pale": "pale_green3", "vivid": "green3"},
    "yellow": {"pale": "light_goldenrod2", "vivid": "gold3"},
    "red": {"pale": "light_pink3", "vivid": "red3"},
    "blue": {"pale": "light_sky_blue3", "vivid": "deep_sky_blue3"},
    "orange": {"pale": "light_salmon3", "vivid": "dark_orange3"},
    "purple": {"pale": "plum3", "vivid": "purple3"},
    "social": {"pale": "medium_purple2", "vivid": "blue_violet"},
}

OVERDUE_COLOR = "red"
TODAY_MARKER_COLOR = "bright_magenta"
ARTIST_COLOR = "sandy_brown"
SOCIAL_COLOR = "medium_purple1"


def phase_style(color: str) -> PhaseStyle:
    """Unknown colors fall back to green."""
    return PHASE_STYLES.get(color, PHASE_STYLES["green"])  # type: ignore[call-overload]
