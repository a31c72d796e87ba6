# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tandem import configuration
from tandem.repository.configuration import CONFIGURATION_REPO
from tandem.terminal.custom_typer import AliasedTyperGroup
from tandem.terminal.parse import parse_date
from tandem.time import date_to_str

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("show_holidays", _enabled(config["show_holidays"]))
    table.add_row("show_anniversaries", _enabled(config["show_anniversaries"]))
    table.add_row("anniversary_date", config["anniversary_date"] or "None")
    table.add_row("couple_id", config["couple_id"])
    table.add_row("viewer_id", config["viewer_id"])
    table.add_row("holiday_source_url", config["holiday_source_url"])
    table.add_row(
        "holiday_refresh_cooldown_minutes",
        str(config["holiday_refresh_cooldown_minutes"]),
    )
    table.add_row("max_visible_lanes", str(config["max_visible_lanes"]))
    table.add_row("timezone", config["timezone"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "log_level", config.get("log_level", configuration.DEFAULT_LOG_LEVEL)
    )

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set_config(
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    show_holidays: Annotated[
        Optional[bool], typer.Option("--show-holidays/--hide-holidays")
    ] = None,
    show_anniversaries: Annotated[
        Optional[bool], typer.Option("--show-anniversaries/--hide-anniversaries")
    ] = None,
    anniversary_date: Annotated[
        Optional[str],
        typer.Option("--anniversary-date", "-a", help="valid input: YYYY-MM-DD"),
    ] = None,
    remove_anniversary_date: Annotated[
        bool, typer.Option("--remove-anniversary-date", "-ra")
    ] = False,
    couple_id: Annotated[Optional[str], typer.Option("--couple-id")] = None,
    viewer_id: Annotated[Optional[str], typer.Option("--viewer-id", "-u")] = None,
    holiday_source_url: Annotated[
        Optional[str], typer.Option("--holiday-source-url")
    ] = None,
    holiday_refresh_cooldown_minutes: Annotated[
        Optional[int], typer.Option("--holiday-refresh-cooldown-minutes", min=0)
    ] = None,
    max_visible_lanes: Annotated[
        Optional[int], typer.Option("--max-visible-lanes", min=1)
    ] = None,
    timezone: Annotated[Optional[str], typer.Option("--timezone", "-tz")] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
) -> None:
    """Update configuration settings."""
    normalized_anniversary_date = None
    if anniversary_date is not None:
        parsed = parse_date(anniversary_date)
        if parsed is not None:
            normalized_anniversary_date = date_to_str(parsed)

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        show_holidays=show_holidays,
        show_anniversaries=show_anniversaries,
        anniversary_date=normalized_anniversary_date,
        remove_anniversary_date=remove_anniversary_date,
        couple_id=couple_id,
        viewer_id=viewer_id,
        holiday_source_url=holiday_source_url,
        holiday_refresh_cooldown_minutes=holiday_refresh_cooldown_minutes,
        max_visible_lanes=max_visible_lanes,
        timezone=timezone,
        data_path=data_path,
        remove_data_path=remove_data_path,
        log_level=log_level.upper() if log_level is not None else None,
    )
    view()
