# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from studio_portal.color import ARTIST_COLOR, TODAY_MARKER_COLOR, phase_style
from studio_portal.geometry import SpanPosition
from studio_portal.model.entity_id import short_id
from studio_portal.model.viewport import PhaseSpan, TimelineLayout
from studio_portal.service.strategy import cycle_for_month, cycle_labels
from studio_portal.service.timeline import viewport_end
from studio_portal.view.header import header
from studio_portal.view.util import truncate

Cell: TypeAlias = tuple[str, str]


def timeline_view(
    user_id: str,
    layout: TimelineLayout,
    show_cycles: bool = False,
    left_column_width: int = 32,
) -> None:
    """
    Display tasks grouped by artist on a day-by-day timeline.

    Each visible phase is drawn as a bar whose position comes from its
    percentage span within the viewport; the completed share of the phase
    is painted in the vivid shade of its color, the rest in the pale one.
    Bars running past the right edge are cropped.

    Args:
        user_id: The user whose tasks are shown
        layout: Output of layout_timeline()
        show_cycles: Add a row naming the retail cycle of each month
        left_column_width: Width of the column holding artist and task names
    """
    header(user_id, "timeline")

    console = Console()
    days = layout["days"]
    cell_width = max(1, (console.width - left_column_width) // len(days))
    chart_width = cell_width * len(days)

    start_label = layout["viewport"]["start"].format("YYYY-MM-DD")
    end_label = viewport_end(layout["viewport"]).format("YYYY-MM-DD")
    console.print(f"\n[bold]{start_label}[/bold] to [bold]{end_label}[/bold]\n")

    chart_elements: list[Text] = []

    if show_cycles:
        cycle_cells = _blank_cells(chart_width)
        for index, cycle in cycle_labels(days).items():
            _place(
                cycle_cells,
                index * cell_width,
                cycle["name"],
                f"bold {cycle['color']}",
            )
        chart_elements.append(_row(" " * left_column_width, "", cycle_cells))

    month_cells = _blank_cells(chart_width)
    day_cells = _blank_cells(chart_width)
    for index, day in enumerate(days):
        column = index * cell_width
        if index == 0 or day.day == 1:
            _place(month_cells, column, day.format("MMM").upper(), "bold grey62")
        if day.day == 1 or day.day % 5 == 0:
            _place(day_cells, column, str(day.day), "grey62")
        if show_cycles:
            cycle = cycle_for_month(day.month)
            if cycle is not None:
                for offset in range(cell_width):
                    if day_cells[column + offset][0] == " ":
                        day_cells[column + offset] = ("·", f"dim {cycle['color']}")
    chart_elements.append(_row(" " * left_column_width, "", month_cells))
    chart_elements.append(_row(" " * left_column_width, "", day_cells))
    chart_elements.append(Text("─" * (left_column_width + chart_width), style="dim"))

    today_column = _today_column(layout["today"], chart_width)

    if not layout["groups"]:
        chart_elements.append(Text("No tasks scheduled", style="dim"))

    for group in layout["groups"]:
        group_label = f"{group['artist']} ({len(group['rows'])})"
        group_cells = _blank_cells(chart_width)
        _mark_today(group_cells, today_column)
        chart_elements.append(
            _row(
                truncate(group_label, left_column_width - 1).ljust(left_column_width),
                f"bold {ARTIST_COLOR}",
                group_cells,
            )
        )

        for row in group["rows"]:
            task = row["task"]
            marker = "◆ " if task["type"] == "social" else "  "
            label = f"{marker}{short_id(task['id'])} {task['name']}"
            task_cells = _blank_cells(chart_width)
            _mark_today(task_cells, today_column)
            for span in row["spans"]:
                _paint_span(task_cells, span, chart_width)
            chart_elements.append(
                _row(
                    truncate(label, left_column_width - 1).ljust(left_column_width),
                    "",
                    task_cells,
                )
            )

    chart = Group(*chart_elements)
    console.print(Padding(chart, (0, 0, 1, 0)))


def span_columns(
    position: SpanPosition, chart_width: int
) -> Optional[tuple[int, int]]:
    """
    Translate a percentage span into (first column, column count).

    Zero-width spans still get one column. Returns None when the span
    starts at or past the right edge.
    """
    offset = round(position["left"] / 100 * chart_width)
    if offset >= chart_width:
        return None
    length = max(1, round(position["width"] / 100 * chart_width))
    return offset, min(length, chart_width - offset)


def _blank_cells(width: int) -> list[Cell]:
    return [(" ", "")] * width


def _place(cells: list[Cell], column: int, text: str, style: str) -> None:
    for offset, char in enumerate(text):
        if 0 <= column + offset < len(cells):
            cells[column + offset] = (char, style)


def _today_column(position: Optional[SpanPosition], chart_width: int) -> Optional[int]:
    if position is None:
        return None
    columns = span_columns(position, chart_width)
    return columns[0] if columns is not None else None


def _mark_today(cells: list[Cell], today_column: Optional[int]) -> None:
    if today_column is not None:
        cells[today_column] = ("│", TODAY_MARKER_COLOR)


def _paint_span(cells: list[Cell], span: PhaseSpan, chart_width: int) -> None:
    columns = span_columns(span["position"], chart_width)
    if columns is None:
        return
    offset, length = columns
    style = phase_style(span["color"])
    done = round(span["progress"] / 100 * length)
    for index in range(length):
        shade = style["vivid"] if index < done else style["pale"]
        cells[offset + index] = (" ", f"on {shade}")
    label = truncate(f"{span['name']} {span['progress']}%", length)
    for index, char in enumerate(label):
        _, cell_style = cells[offset + index]
        cells[offset + index] = (char, f"bold black {cell_style}")


def _row(label: str, label_style: str, cells: list[Cell]) -> Text:
    row = Text(label, style=label_style)
    for char, style in cells:
        row.append(char, style=style)
    return row
