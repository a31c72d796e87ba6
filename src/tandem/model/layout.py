# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from tandem.model.entity import DateRangeEntity


class CalendarDay(TypedDict):
    date: pendulum.Date
    in_month: bool


class WeekRow(TypedDict):
    index: int
    days: list[CalendarDay]
    week_start: pendulum.Date
    week_end: pendulum.Date
    entities: list[DateRangeEntity]


class PlacedEntity(TypedDict):
    entity: DateRangeEntity
    lane_index: int
    start_col: int
    end_col: int
    is_segment_start: bool
    is_segment_end: bool


class WeekLayout(TypedDict):
    week: WeekRow
    placements: list[PlacedEntity]
    lane_count: int
