# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from tandem.color import ANNIVERSARY_COLOR
from tandem.model.category import Category
from tandem.model.entity import DateRangeEntity
from tandem.model.entity_kind import EntityKind
from tandem.time import date_rolled, date_to_str

logger = logging.getLogger(__name__)

MILESTONE_INTERVAL_DAYS = 100
MAX_MILESTONE_DAYS = 10000
MAX_ANNIVERSARY_YEARS = 50
HORIZON_YEARS_AHEAD = 2


def get_horizon_year(today: pendulum.Date) -> int:
    return today.year + HORIZON_YEARS_AHEAD


def _anniversary_entity(
    kind: str, offset: int, title: str, date: pendulum.Date
) -> DateRangeEntity:
    date_str = date_to_str(date)
    return {
        "id": f"anniversary:{kind}:{offset}:{date_str}",
        "kind": EntityKind.ANNIVERSARY,
        "title": title,
        "description": EntityKind.ANNIVERSARY,
        "start_date": date,
        "end_date": date,
        "color": ANNIVERSARY_COLOR,
        "category": Category.SHARED,
        "editable": False,
        "writer_id": None,
    }


def generate_day_milestones(
    anchor: pendulum.Date, horizon_year: int
) -> list[DateRangeEntity]:
    """Every 100th day counting the anchor as day 1, up to the horizon year."""
    milestones: list[DateRangeEntity] = []
    for days in range(
        MILESTONE_INTERVAL_DAYS, MAX_MILESTONE_DAYS + 1, MILESTONE_INTERVAL_DAYS
    ):
        target = anchor.add(days=days - 1)
        if target.year > horizon_year:
            break
        milestones.append(_anniversary_entity("days", days, f"{days}일", target))
    return milestones


def generate_yearly_anniversaries(
    anchor: pendulum.Date, horizon_year: int
) -> list[DateRangeEntity]:
    anniversaries: list[DateRangeEntity] = []
    for years in range(1, MAX_ANNIVERSARY_YEARS + 1):
        target = date_rolled(anchor.year + years, anchor.month, anchor.day)
        if target.year > horizon_year:
            break
        anniversaries.append(
            _anniversary_entity("years", years, f"{years}주년", target)
        )
    return anniversaries


def generate_anniversaries(
    anchor: Optional[pendulum.Date], horizon_year: int
) -> list[DateRangeEntity]:
    """
    Generate the 100-day milestones followed by the yearly anniversaries.

    Args:
        anchor: The anniversary date, or None when not set
        horizon_year: Last calendar year to generate entities for

    Returns:
        Single-day entities with ids that depend only on kind, offset and date;
        empty when there is no anchor
    """
    if anchor is None:
        return []
    return generate_day_milestones(anchor, horizon_year) + (
        generate_yearly_anniversaries(anchor, horizon_year)
    )


class AnniversaryCache:
    """Memoizes generated anniversaries keyed by anchor date and horizon year."""

    def __init__(self) -> None:
        self._entries: dict[tuple[str, int], list[DateRangeEntity]] = {}

    def get(
        self, anchor: Optional[pendulum.Date], horizon_year: int
    ) -> list[DateRangeEntity]:
        if anchor is None:
            return []
        key = (date_to_str(anchor), horizon_year)
        if key not in self._entries:
            logger.debug(
                "generating anniversaries for %s through %d", key[0], horizon_year
            )
            self._entries[key] = generate_anniversaries(anchor, horizon_year)
        return list(self._entries[key])

    def invalidate(self, anchor: Optional[pendulum.Date] = None) -> None:
        """Drop cached entries for one anchor, or everything when anchor is None."""
        if anchor is None:
            self._entries.clear()
            return
        anchor_str = date_to_str(anchor)
        for key in [key for key in self._entries if key[0] == anchor_str]:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
