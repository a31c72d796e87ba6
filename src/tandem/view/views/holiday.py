# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from tandem.color import HOLIDAY_COLOR
from tandem.model.holiday import Holiday
from tandem.time import datetime_to_iso_str_optional
from tandem.view.views.header import header


def holidays_view(
    viewer_id: str,
    holidays: list[Holiday],
    last_updated: Optional[pendulum.DateTime],
    year: Optional[int] = None,
) -> None:
    header(viewer_id, "holidays")

    holidays_table = Table(box=box.SIMPLE)
    holidays_table.add_column("date")
    holidays_table.add_column("title", style=HOLIDAY_COLOR)

    for holiday in holidays:
        if year is not None and not holiday["date"].startswith(str(year)):
            continue
        holidays_table.add_row(holiday["date"], holiday["title"])

    console = Console()
    console.print(holidays_table)
    console.print(
        f"[bright_black]last updated: "
        f"{datetime_to_iso_str_optional(last_updated) or 'never (bundled list)'}"
        f"[/bright_black]"
    )
