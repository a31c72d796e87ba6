# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from tandem.repository.configuration import CONFIGURATION_REPO
from tandem.service.lane import layout_month
from tandem.service.timeline import (
    entities_for_day,
    entities_for_month,
    search_entities,
    split_today,
)
from tandem.terminal.custom_typer import AliasedTyperGroup
from tandem.terminal.parse import parse_date, parse_month
from tandem.terminal.timeline import get_today, load_timeline
from tandem.view.views import calendar as calendar_report
from tandem.view.views import schedule as schedule_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("month, m")
def month(
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="valid input: YYYY-MM"),
    ] = None,
    cell_width: Annotated[int, typer.Option("--cell-width", "-w")] = 14,
) -> None:
    """Show the month grid with schedules laid out in lanes."""
    config = CONFIGURATION_REPO.get_config()
    current_day = get_today(config)

    year_month = parse_month(month) or (current_day.year, current_day.month)
    month_start = pendulum.date(year_month[0], year_month[1], 1)

    week_layouts = layout_month(
        month_start.year, month_start.month, load_timeline(config)
    )
    calendar_report.calendar_month_view(
        config["viewer_id"],
        month_start,
        week_layouts,
        today=current_day,
        max_visible_lanes=config["max_visible_lanes"],
        cell_width=cell_width,
    )


@app.command("list, ls")
def list_timeline(
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="valid input: YYYY-MM"),
    ] = None,
    day: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--day",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    search: Annotated[Optional[str], typer.Option("--search", "-s")] = None,
) -> None:
    """List the composed timeline for a month, a single day or a search."""
    config = CONFIGURATION_REPO.get_config()
    timeline = load_timeline(config)

    if search is not None and search.strip() != "":
        entities = search_entities(timeline, search)
        report_name = f"search: {search}"
    elif day is not None:
        entities = entities_for_day(timeline, day)
        report_name = day.to_date_string()
    else:
        current_day = get_today(config)
        year, month_number = parse_month(month) or (
            current_day.year,
            current_day.month,
        )
        today_entities, entities = split_today(
            entities_for_month(timeline, year, month_number), current_day
        )
        report_name = f"{year}-{month_number:02d}"
        if today_entities:
            schedule_report.timeline_view(
                config["viewer_id"],
                f"today ({current_day.to_date_string()})",
                today_entities,
            )

    schedule_report.timeline_view(config["viewer_id"], report_name, entities)
