# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from studio_portal.time import DateLike, normalize_date


class SpanPosition(TypedDict):
    left: float
    width: float


def position_in_window(
    start: DateLike,
    end: DateLike,
    view_start: DateLike,
    view_end: DateLike,
) -> Optional[SpanPosition]:
    """
    Express the span [start, end] as percentages of the viewport width.

    All four dates are normalized to local midnight first. Returns None when
    the span lies entirely before or after the viewport. A span that starts
    before the viewport is clipped on the left: it is pinned to 0% and the
    elapsed part is removed from its width. Spans running past the right
    edge are not clipped; the renderer is expected to crop the overflow.
    """
    start_day = normalize_date(start).date()
    end_day = normalize_date(end).date()
    view_start_day = normalize_date(view_start).date()
    view_end_day = normalize_date(view_end).date()

    total_days = (view_end_day - view_start_day).days
    if total_days <= 0:
        raise ValueError("viewport must span at least one day")

    relative_start = (start_day - view_start_day).days / total_days
    relative_duration = (end_day - start_day).days / total_days

    if relative_start > 1 or relative_start + relative_duration < 0:
        return None

    if relative_start < 0:
        relative_duration += relative_start
        relative_start = 0

    return {
        "left": relative_start * 100,
        "width": max(0.0, relative_duration * 100),
    }
