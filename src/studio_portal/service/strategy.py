# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from studio_portal.model.retail_cycle import RetailCycle

RETAIL_CYCLES: list[RetailCycle] = [
    {
        "name": "Summer Readiness",
        "start_month": 1,
        "end_month": 3,
        "color": "yellow",
        "target_dates": ["Memorial Day", "Father's Day", "Summer Travel"],
    },
    {
        "name": "Back-to-School & Harvest",
        "start_month": 4,
        "end_month": 6,
        "color": "dark_orange",
        "target_dates": ["Back to School", "Labor Day", "Halloween Prep"],
    },
    {
        "name": "Holiday Gifting",
        "start_month": 7,
        "end_month": 9,
        "color": "dodger_blue2",
        "target_dates": ["Black Friday", "Cyber Monday", "Christmas", "Hanukkah"],
    },
    {
        "name": "Spring & Love",
        "start_month": 10,
        "end_month": 12,
        "color": "hot_pink",
        "target_dates": ["New Year's", "Valentine's Day", "Mother's Day"],
    },
]


def cycle_for_month(month: int) -> Optional[RetailCycle]:
    for cycle in RETAIL_CYCLES:
        if cycle["start_month"] <= month <= cycle["end_month"]:
            return cycle
    return None


def cycle_labels(days: list[pendulum.DateTime]) -> dict[int, RetailCycle]:
    """Column indices where a cycle name is printed: the first day and each 1st of month."""
    labels: dict[int, RetailCycle] = {}
    for index, day in enumerate(days):
        if index == 0 or day.day == 1:
            cycle = cycle_for_month(day.month)
            if cycle is not None:
                labels[index] = cycle
    return labels
