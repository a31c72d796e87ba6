# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from tandem.color import color_for_category
from tandem.model.category import Category
from tandem.model.schedule import Schedule
from tandem.service.perspective import to_writer_category
from tandem.template.schedule import get_schedule_template
from tandem.time import date_to_str


class InvalidDateRangeError(ValueError):
    def __init__(self, start_date: pendulum.Date, end_date: pendulum.Date) -> None:
        super().__init__(
            f"End date {date_to_str(end_date)} is before start date "
            f"{date_to_str(start_date)}"
        )
        self.start_date = start_date
        self.end_date = end_date


def validate_date_range(start_date: pendulum.Date, end_date: pendulum.Date) -> None:
    if end_date < start_date:
        raise InvalidDateRangeError(start_date, end_date)


def validate_category(category: str) -> None:
    if category not in Category.ALL:
        raise ValueError(
            f"Category must be one of {', '.join(Category.ALL)}, got '{category}'"
        )


def build_new_schedule(
    couple_id: str,
    writer_id: str,
    title: str,
    start_date: pendulum.Date,
    end_date: Optional[pendulum.Date] = None,
    description: Optional[str] = None,
    category: str = Category.SHARED,
) -> Schedule:
    """
    Create a schedule authored by writer_id.

    The writer picks the category from their own perspective, so it is stored
    as is. A missing end date makes a single-day schedule.

    Raises:
        InvalidDateRangeError: If end_date is before start_date
        ValueError: If the category is unknown
    """
    if end_date is None:
        end_date = start_date
    validate_date_range(start_date, end_date)
    validate_category(category)

    schedule = get_schedule_template()
    schedule["couple_id"] = couple_id
    schedule["writer_id"] = writer_id
    schedule["title"] = title
    schedule["description"] = description
    schedule["start_date"] = start_date
    schedule["end_date"] = end_date
    schedule["category"] = category
    schedule["color"] = color_for_category(category)
    return schedule


def resolve_stored_category(
    schedule: Schedule, viewer_id: str, selected_category: str
) -> str:
    """Translate a category picked by the viewer into the writer's perspective."""
    validate_category(selected_category)
    return to_writer_category(selected_category, schedule["writer_id"], viewer_id)


def validate_schedule_update(
    schedule: Schedule,
    start_date: Optional[pendulum.Date],
    end_date: Optional[pendulum.Date],
) -> None:
    """Check the range that results from applying an edit to a stored schedule."""
    validate_date_range(
        start_date if start_date is not None else schedule["start_date"],
        end_date if end_date is not None else schedule["end_date"],
    )
