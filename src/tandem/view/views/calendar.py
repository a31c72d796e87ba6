# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.cells import cell_len, set_cell_size
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tandem.color import OUTSIDE_MONTH_COLOR, OVERFLOW_COLOR, TODAY_COLOR
from tandem.model.layout import PlacedEntity, WeekLayout
from tandem.view.views.header import header

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
BAR_FILL = "━"


def calendar_month_view(
    viewer_id: str,
    month_start: pendulum.Date,
    week_layouts: list[WeekLayout],
    today: Optional[pendulum.Date] = None,
    max_visible_lanes: int = 3,
    cell_width: int = 14,
) -> None:
    """
    Display a month grid with multi-day schedules drawn as lane bars.

    Args:
        viewer_id: Identity of the participant looking at the calendar
        month_start: First day of the displayed month
        week_layouts: One laid-out week row per grid row
        today: Date to highlight (defaults to none)
        max_visible_lanes: Lanes drawn per week; the rest count as overflow
        cell_width: Width of each day cell in characters
    """
    header(viewer_id, "calendar")

    console = Console()
    console.print(f"\n[bold]{month_start.format('MMMM YYYY')}[/bold]\n")
    console.print(render_month_grid(week_layouts, today, max_visible_lanes, cell_width))
    console.print()


def render_month_grid(
    week_layouts: list[WeekLayout],
    today: Optional[pendulum.Date],
    max_visible_lanes: int,
    cell_width: int,
) -> Table:
    grid = Table(box=box.SQUARE, show_lines=True, padding=(0, 0))
    for index, name in enumerate(WEEKDAY_NAMES):
        style = "bold #FB7185" if index == 0 else "bold #60A5FA" if index == 6 else "bold"
        grid.add_column(name, header_style=style, width=cell_width, no_wrap=True)

    for week_layout in week_layouts:
        grid.add_row(
            *[
                _render_cell(
                    week_layout, column, today, max_visible_lanes, cell_width
                )
                for column in range(len(week_layout["week"]["days"]))
            ]
        )
    return grid


def _render_cell(
    week_layout: WeekLayout,
    column: int,
    today: Optional[pendulum.Date],
    max_visible_lanes: int,
    cell_width: int,
) -> Text:
    day = week_layout["week"]["days"][column]
    cell = Text()

    day_style = ""
    if today is not None and day["date"] == today:
        day_style = TODAY_COLOR
    elif not day["in_month"]:
        day_style = OUTSIDE_MONTH_COLOR
    cell.append(f"{day['date'].day:>2}", style=day_style)

    covering = [
        placement
        for placement in week_layout["placements"]
        if placement["start_col"] <= column <= placement["end_col"]
    ]
    visible_lanes = min(week_layout["lane_count"], max_visible_lanes)
    for lane_index in range(visible_lanes):
        cell.append("\n")
        placement = next(
            (p for p in covering if p["lane_index"] == lane_index), None
        )
        if placement is None:
            cell.append(" " * cell_width)
        else:
            cell.append_text(_render_bar_segment(placement, column, cell_width))

    hidden = len([p for p in covering if p["lane_index"] >= max_visible_lanes])
    if hidden > 0:
        cell.append("\n")
        cell.append(f"+{hidden} more", style=OVERFLOW_COLOR)

    return cell


def _render_bar_segment(placement: PlacedEntity, column: int, cell_width: int) -> Text:
    """One cell's slice of a bar; caps only where the schedule truly starts or ends."""
    left_cap = "[" if column == placement["start_col"] and placement["is_segment_start"] else ""
    right_cap = "]" if column == placement["end_col"] and placement["is_segment_end"] else ""
    body_width = max(cell_width - len(left_cap) - len(right_cap), 0)

    if column == placement["start_col"]:
        title = placement["entity"]["title"]
        if cell_len(title) > body_width:
            title = set_cell_size(title, body_width)
        body = title + BAR_FILL * (body_width - cell_len(title))
    else:
        body = BAR_FILL * body_width

    return Text(
        f"{left_cap}{body}{right_cap}",
        style=f"black on {placement['entity']['color']}",
    )
