# SPDX-License-Identifier: MIT

import pendulum

from tandem.model.entity import DateRangeEntity
from tandem.model.layout import PlacedEntity, WeekLayout, WeekRow
from tandem.service.week import build_month_weeks


def _entity_duration_days(entity: DateRangeEntity) -> int:
    return entity["start_date"].diff(entity["end_date"]).in_days()


def sort_for_placement(entities: list[DateRangeEntity]) -> list[DateRangeEntity]:
    """Start date ascending, longer first on ties, then id for a stable order."""
    return sorted(
        entities,
        key=lambda entity: (
            entity["start_date"],
            -_entity_duration_days(entity),
            entity["id"],
        ),
    )


def _column_of(week: WeekRow, date: pendulum.Date, default: int) -> int:
    for index, day in enumerate(week["days"]):
        if day["date"] == date:
            return index
    return default


def allocate_lanes(week: WeekRow) -> list[PlacedEntity]:
    """
    Place each entity of a week row in the lowest free lane.

    A lane is free when the end date of the entity last placed in it is
    strictly before the current entity's start date. Only that end date is
    tracked per lane. Entities must already satisfy start_date <= end_date.
    """
    lane_ends: list[pendulum.Date] = []
    placements: list[PlacedEntity] = []

    for entity in sort_for_placement(week["entities"]):
        is_segment_start = entity["start_date"] >= week["week_start"]
        is_segment_end = entity["end_date"] <= week["week_end"]

        start_col = _column_of(week, entity["start_date"], 0) if is_segment_start else 0
        end_col = _column_of(week, entity["end_date"], 6) if is_segment_end else 6

        lane_index = -1
        for index, lane_end in enumerate(lane_ends):
            if lane_end < entity["start_date"]:
                lane_index = index
                break

        if lane_index == -1:
            lane_index = len(lane_ends)
            lane_ends.append(entity["end_date"])
        else:
            lane_ends[lane_index] = entity["end_date"]

        placements.append(
            {
                "entity": entity,
                "lane_index": lane_index,
                "start_col": start_col,
                "end_col": end_col,
                "is_segment_start": is_segment_start,
                "is_segment_end": is_segment_end,
            }
        )

    return placements


def layout_week(week: WeekRow) -> WeekLayout:
    placements = allocate_lanes(week)
    lane_count = max((p["lane_index"] for p in placements), default=-1) + 1
    return {"week": week, "placements": placements, "lane_count": lane_count}


def layout_month(
    year: int, month: int, entities: list[DateRangeEntity]
) -> list[WeekLayout]:
    """Bucket a month's timeline into week rows and lay out each row's lanes."""
    return [layout_week(week) for week in build_month_weeks(year, month, entities)]
