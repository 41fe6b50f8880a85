# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from studio_portal.model.retail_cycle import RetailCycle
from studio_portal.view.header import header

MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]  # fmt: skip


def strategy_view(user_id: str, cycles: list[RetailCycle]) -> None:
    header(user_id, "strategy")

    console = Console()

    calendar_table = Table(box=box.SIMPLE)
    calendar_table.add_column("cycle")
    for month_name in MONTH_NAMES:
        calendar_table.add_column(month_name, justify="center")

    for cycle in cycles:
        row = [f"[{cycle['color']}]{cycle['name']}[/{cycle['color']}]"]
        for month in range(1, 13):
            if cycle["start_month"] <= month <= cycle["end_month"]:
                row.append(f"[{cycle['color']}]███[/{cycle['color']}]")
            else:
                row.append("")
        calendar_table.add_row(*row)
    console.print(calendar_table)

    targets_table = Table(box=box.SIMPLE)
    targets_table.add_column("cycle")
    targets_table.add_column("months")
    targets_table.add_column("target dates")
    for cycle in cycles:
        targets_table.add_row(
            f"[{cycle['color']}]{cycle['name']}[/{cycle['color']}]",
            f"{MONTH_NAMES[cycle['start_month'] - 1]}-"
            f"{MONTH_NAMES[cycle['end_month'] - 1]}",
            ", ".join(cycle["target_dates"]),
        )
    console.print(targets_table)
