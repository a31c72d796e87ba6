# SPDX-License-Identifier: MIT

import pendulum

from tandem.model.entity import DateRangeEntity
from tandem.model.layout import CalendarDay, WeekRow

DAYS_PER_WEEK = 7


def build_month_days(year: int, month: int) -> list[CalendarDay]:
    """
    All day cells of a Sunday-first month grid.

    Leading days from the previous month and trailing days from the next
    month pad the grid to whole weeks.
    """
    month_start = pendulum.date(year, month, 1)
    month_end = month_start.end_of("month")

    # isoweekday: Monday=1 ... Sunday=7, so Sunday maps to zero leading days
    leading = month_start.isoweekday() % DAYS_PER_WEEK
    grid_start = month_start.subtract(days=leading)

    cell_count = leading + month_end.day
    cell_count += -cell_count % DAYS_PER_WEEK

    return [
        {
            "date": grid_start.add(days=offset),
            "in_month": grid_start.add(days=offset).month == month,
        }
        for offset in range(cell_count)
    ]


def entities_in_week(
    entities: list[DateRangeEntity],
    week_start: pendulum.Date,
    week_end: pendulum.Date,
) -> list[DateRangeEntity]:
    return [
        entity
        for entity in entities
        if entity["end_date"] >= week_start and entity["start_date"] <= week_end
    ]


def build_month_weeks(
    year: int, month: int, entities: list[DateRangeEntity]
) -> list[WeekRow]:
    """
    Split a month grid into 7-day rows and bucket the entities into them.

    Every row is filtered independently, so an entity spanning several weeks
    appears in each row it intersects.
    """
    days = build_month_days(year, month)
    weeks: list[WeekRow] = []
    for index, offset in enumerate(range(0, len(days), DAYS_PER_WEEK)):
        week_days = days[offset : offset + DAYS_PER_WEEK]
        week_start = week_days[0]["date"]
        week_end = week_days[-1]["date"]
        weeks.append(
            {
                "index": index,
                "days": week_days,
                "week_start": week_start,
                "week_end": week_end,
                "entities": entities_in_week(entities, week_start, week_end),
            }
        )
    return weeks
