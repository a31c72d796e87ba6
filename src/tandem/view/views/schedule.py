# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tandem.model.category import CATEGORY_LABELS
from tandem.model.entity import DateRangeEntity
from tandem.model.schedule import Schedule
from tandem.service.perspective import to_viewer_perspective
from tandem.time import date_to_str, datetime_to_iso_str
from tandem.view.views.header import header


def timeline_view(
    viewer_id: str,
    report_name: str,
    entities: list[DateRangeEntity],
    columns: list[str] = ["id", "title", "start_date", "end_date", "category"],
    use_color: bool = True,
) -> None:
    header(viewer_id, report_name)

    timeline_table = Table(box=box.SIMPLE)
    for column in columns:
        timeline_table.add_column(column)

    for entity in entities:
        row = []
        for column in columns:
            if column in ("start_date", "end_date"):
                column_value = date_to_str(entity[column])  # type: ignore[literal-required]
            elif column == "category":
                column_value = CATEGORY_LABELS[entity["category"]]
                if not entity["editable"]:
                    column_value = entity["kind"]
            elif entity[column] is not None:  # type: ignore[literal-required]
                column_value = escape(str(entity[column]))  # type: ignore[literal-required]
            else:
                column_value = ""

            if use_color:
                column_value = f"[{entity['color']}]{column_value}[/{entity['color']}]"
            row.append(column_value)
        timeline_table.add_row(*row)

    console = Console()
    console.print(timeline_table)


def single_schedule_view(viewer_id: str, schedule: Schedule) -> None:
    """Show one schedule with its category as the viewer sees it."""
    entity = to_viewer_perspective(schedule, viewer_id)
    header(viewer_id, "schedule")

    schedule_table = Table(box=box.SIMPLE)
    schedule_table.add_column("property")
    schedule_table.add_column("value")

    schedule_table.add_row("id", str(schedule["id"]))
    schedule_table.add_row("title", escape(schedule["title"]))
    schedule_table.add_row("description", escape(schedule["description"] or ""))
    schedule_table.add_row("start_date", date_to_str(schedule["start_date"]))
    schedule_table.add_row("end_date", date_to_str(schedule["end_date"]))
    schedule_table.add_row("writer_id", schedule["writer_id"])
    schedule_table.add_row(
        "category",
        f"[{entity['color']}]{entity['category']}"
        f"[/{entity['color']}]",
    )
    schedule_table.add_row("created", datetime_to_iso_str(schedule["created"]))
    schedule_table.add_row("updated", datetime_to_iso_str(schedule["updated"]))

    console = Console()
    console.print(schedule_table)
