# SPDX-License-Identifier: MIT

from typing import TypedDict


class RetailCycle(TypedDict):
    name: str
    start_month: int
    end_month: int
    color: str
    target_dates: list[str]
