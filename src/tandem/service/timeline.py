# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from tandem.model.entity import DateRangeEntity
from tandem.model.holiday import Holiday
from tandem.model.schedule import Schedule
from tandem.service.anniversary import AnniversaryCache, get_horizon_year
from tandem.service.holiday import holidays_to_entities
from tandem.service.perspective import to_viewer_perspective


def sort_timeline(entities: list[DateRangeEntity]) -> list[DateRangeEntity]:
    return sorted(entities, key=lambda entity: entity["start_date"])


class TimelineComposer:
    """
    Merges authored, holiday and anniversary entities into one timeline.

    The composer owns the anniversary memoization table; call
    set_anniversary_date() whenever the anchor changes so stale entries are
    dropped.
    """

    def __init__(self) -> None:
        self.anniversary_cache = AnniversaryCache()
        self._anniversary_date: Optional[pendulum.Date] = None

    @property
    def anniversary_date(self) -> Optional[pendulum.Date]:
        return self._anniversary_date

    def set_anniversary_date(self, anniversary_date: Optional[pendulum.Date]) -> None:
        if anniversary_date != self._anniversary_date:
            self.anniversary_cache.invalidate(self._anniversary_date)
            self._anniversary_date = anniversary_date

    def compose(
        self,
        schedules: list[Schedule],
        viewer_id: str,
        holidays: list[Holiday],
        today: pendulum.Date,
        show_holidays: bool = True,
        show_anniversaries: bool = True,
    ) -> list[DateRangeEntity]:
        """
        Build the viewer-relative timeline sorted by start date.

        Args:
            schedules: Authored schedules as stored, in any order
            viewer_id: Identity of the participant looking at the calendar
            holidays: Cached holiday list
            today: The current local date, which fixes the anniversary horizon
            show_holidays: Whether holidays contribute to the timeline
            show_anniversaries: Whether anniversaries contribute to the timeline

        Returns:
            A new list; none of the inputs are modified
        """
        entities = [
            to_viewer_perspective(schedule, viewer_id) for schedule in schedules
        ]
        if show_holidays:
            entities += holidays_to_entities(holidays)
        if show_anniversaries:
            entities += self.anniversary_cache.get(
                self._anniversary_date, get_horizon_year(today)
            )
        return sort_timeline(entities)


def entities_for_range(
    timeline: list[DateRangeEntity], start: pendulum.Date, end: pendulum.Date
) -> list[DateRangeEntity]:
    return [
        entity
        for entity in timeline
        if entity["end_date"] >= start and entity["start_date"] <= end
    ]


def entities_for_month(
    timeline: list[DateRangeEntity], year: int, month: int
) -> list[DateRangeEntity]:
    month_start = pendulum.date(year, month, 1)
    return entities_for_range(timeline, month_start, month_start.end_of("month"))


def entities_for_day(
    timeline: list[DateRangeEntity], day: pendulum.Date
) -> list[DateRangeEntity]:
    return entities_for_range(timeline, day, day)


def search_entities(
    timeline: list[DateRangeEntity], query: str
) -> list[DateRangeEntity]:
    needle = query.strip().lower()
    if needle == "":
        return list(timeline)
    return [
        entity
        for entity in timeline
        if needle in entity["title"].lower()
        or needle in (entity["description"] or "").lower()
    ]


def split_today(
    entities: list[DateRangeEntity], today: pendulum.Date
) -> tuple[list[DateRangeEntity], list[DateRangeEntity]]:
    """Separate the entities covering today from the rest, keeping order."""
    covering_ids = {entity["id"] for entity in entities_for_day(entities, today)}
    return (
        [entity for entity in entities if entity["id"] in covering_ids],
        [entity for entity in entities if entity["id"] not in covering_ids],
    )
