# SPDX-License-Identifier: MIT

import math
from typing import Annotated, Optional

import typer
from rich.console import Console

from tandem.repository.configuration import CONFIGURATION_REPO
from tandem.repository.holiday import HOLIDAY_REPO
from tandem.service.holiday import refresh_holidays
from tandem.service.holiday_source import HttpHolidaySource
from tandem.terminal.custom_typer import AliasedTyperGroup
from tandem.terminal.timeline import get_today
from tandem.time import now_utc
from tandem.view.views import holiday as holiday_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("refresh, r")
def refresh() -> None:
    """Fetch the latest holidays, at most once per cooldown interval."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    result = refresh_holidays(
        source=HttpHolidaySource(config["holiday_source_url"]),
        cached=HOLIDAY_REPO.get_holidays(),
        last_updated=HOLIDAY_REPO.get_last_updated(),
        now=now_utc(),
        cooldown_minutes=config["holiday_refresh_cooldown_minutes"],
        today=get_today(config),
    )

    if result["status"] == "rejected":
        remaining_minutes = math.ceil((result["remaining_seconds"] or 0) / 60)
        console.print(
            f"[yellow]Holidays were refreshed recently. "
            f"Try again in {remaining_minutes} minute(s).[/yellow]"
        )
        raise typer.Exit(1)

    if result["status"] == "empty":
        console.print("[yellow]No holidays could be fetched.[/yellow]")
        raise typer.Exit(1)

    if result["last_updated"] is not None:
        HOLIDAY_REPO.replace_holidays(result["holidays"], result["last_updated"])
    console.print(f"[green]Updated {len(result['holidays'])} holidays.[/green]")
    if result["failed_years"]:
        console.print(
            f"[yellow]Skipped years that failed to load: "
            f"{', '.join(str(year) for year in result['failed_years'])}[/yellow]"
        )


@app.command("list, ls")
def list_holidays(
    year: Annotated[Optional[int], typer.Option("--year", "-y")] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    holiday_report.holidays_view(
        config["viewer_id"],
        HOLIDAY_REPO.get_holidays(),
        HOLIDAY_REPO.get_last_updated(),
        year=year,
    )
