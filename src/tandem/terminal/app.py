# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from tandem.terminal import calendar, configuration, holiday, schedule
from tandem.terminal.custom_typer import AliasedTyperGroup
from tandem.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Tandem - a shared calendar for two in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(schedule.app, name="schedule, s")
app.add_typer(calendar.app, name="calendar, cal")
app.add_typer(holiday.app, name="holiday, h")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    Tandem - a shared calendar for two in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
