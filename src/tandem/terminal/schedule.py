# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from tandem.color import color_for_category
from tandem.model.category import Category
from tandem.repository.configuration import CONFIGURATION_REPO
from tandem.repository.schedule import SCHEDULE_REPO
from tandem.service.perspective import to_viewer_perspective
from tandem.service.schedule import (
    build_new_schedule,
    resolve_stored_category,
    validate_schedule_update,
)
from tandem.service.timeline import sort_timeline
from tandem.terminal.custom_typer import AliasedTyperGroup
from tandem.terminal.parse import parse_category, parse_date
from tandem.view.views import schedule as schedule_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
CATEGORY_HELP = "from your perspective: mine, partner or shared"


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="schedule title")],
    start: Annotated[
        pendulum.Date,
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ],
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--end", "-e", parser=parse_date, help=DATE_HELP),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    category: Annotated[
        str, typer.Option("--category", "-c", help=CATEGORY_HELP)
    ] = Category.SHARED,
) -> None:
    config = CONFIGURATION_REPO.get_config()

    try:
        schedule = build_new_schedule(
            couple_id=config["couple_id"],
            writer_id=config["viewer_id"],
            title=title,
            start_date=start,
            end_date=end,
            description=description,
            category=parse_category(category) or Category.SHARED,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    id = SCHEDULE_REPO.save_new_schedule(schedule)
    schedule_report.single_schedule_view(
        config["viewer_id"], SCHEDULE_REPO.get_schedule(id)
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--end", "-e", parser=parse_date, help=DATE_HELP),
    ] = None,
    category: Annotated[
        Optional[str], typer.Option("--category", "-c", help=CATEGORY_HELP)
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    try:
        schedule = SCHEDULE_REPO.get_schedule(id)
        validate_schedule_update(schedule, start, end)
        stored_category: Optional[str] = None
        selected_category = parse_category(category)
        if selected_category is not None:
            stored_category = resolve_stored_category(
                schedule, config["viewer_id"], selected_category
            )
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    SCHEDULE_REPO.modify_schedule(
        id,
        title=title,
        description=description,
        start_date=start,
        end_date=end,
        category=stored_category,
        color=(
            color_for_category(stored_category)
            if stored_category is not None
            else None
        ),
        remove_description=remove_description,
    )
    schedule_report.single_schedule_view(
        config["viewer_id"], SCHEDULE_REPO.get_schedule(id)
    )


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    console = Console()
    try:
        SCHEDULE_REPO.delete_schedule(id)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"deleted schedule {id}")


@app.command("list, ls")
def list_schedules() -> None:
    """List authored schedules as the current viewer sees them."""
    config = CONFIGURATION_REPO.get_config()
    entities = sort_timeline(
        [
            to_viewer_perspective(schedule, config["viewer_id"])
            for schedule in SCHEDULE_REPO.get_schedules_for_couple(
                config["couple_id"]
            )
        ]
    )
    schedule_report.timeline_view(config["viewer_id"], "schedules", entities)
