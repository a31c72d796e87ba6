# SPDX-License-Identifier: MIT

import logging
import math
from typing import Optional

import pendulum

from tandem.color import HOLIDAY_COLOR
from tandem.model.category import Category
from tandem.model.entity import DateRangeEntity
from tandem.model.entity_kind import EntityKind
from tandem.model.holiday import Holiday, HolidayRefreshResult
from tandem.service.holiday_source import HolidayFetchError, HolidaySource
from tandem.time import date_from_str

logger = logging.getLogger(__name__)

# Month from which next year's holidays are included in a refresh
NEXT_YEAR_FROM_MONTH = 8


def holidays_to_entities(holidays: list[Holiday]) -> list[DateRangeEntity]:
    """Convert cached holidays into single-day entities.

    The list index is part of the id so two holidays on one date stay distinct.
    """
    entities: list[DateRangeEntity] = []
    for index, holiday in enumerate(holidays):
        date = date_from_str(holiday["date"])
        entities.append(
            {
                "id": f"holiday:{holiday['date']}:{index}",
                "kind": EntityKind.HOLIDAY,
                "title": holiday["title"],
                "description": EntityKind.HOLIDAY,
                "start_date": date,
                "end_date": date,
                "color": HOLIDAY_COLOR,
                "category": Category.SHARED,
                "editable": False,
                "writer_id": None,
            }
        )
    return entities


def get_refresh_years(today: pendulum.Date) -> list[int]:
    end_year = today.year + 1 if today.month >= NEXT_YEAR_FROM_MONTH else today.year
    return list(range(today.year - 2, end_year + 1))


def merge_holidays(
    cached: list[Holiday], fetched_by_year: dict[int, list[Holiday]]
) -> list[Holiday]:
    """
    Replace every fetched year wholesale, keep the other cached years.

    Returns:
        Entries deduplicated on (date, title) and sorted by date
    """
    replaced_years = {str(year) for year in fetched_by_year}
    kept = [holiday for holiday in cached if holiday["date"][:4] not in replaced_years]

    merged: dict[tuple[str, str], Holiday] = {}
    for holiday in kept:
        merged[(holiday["date"], holiday["title"])] = holiday
    for year in sorted(fetched_by_year):
        for holiday in fetched_by_year[year]:
            merged[(holiday["date"], holiday["title"])] = {
                "date": holiday["date"],
                "title": holiday["title"],
            }

    return sorted(merged.values(), key=lambda holiday: holiday["date"])


def get_cooldown_remaining(
    last_updated: Optional[pendulum.DateTime],
    now: pendulum.DateTime,
    cooldown_minutes: int,
) -> Optional[int]:
    """Seconds left before another refresh is allowed, or None if allowed now."""
    if last_updated is None:
        return None
    elapsed_seconds = (now - last_updated).total_seconds()
    remaining_seconds = cooldown_minutes * 60 - elapsed_seconds
    if remaining_seconds <= 0:
        return None
    return math.ceil(remaining_seconds)


def refresh_holidays(
    source: HolidaySource,
    cached: list[Holiday],
    last_updated: Optional[pendulum.DateTime],
    now: pendulum.DateTime,
    cooldown_minutes: int,
    today: Optional[pendulum.Date] = None,
) -> HolidayRefreshResult:
    """
    Fetch the refresh window year by year and merge it into the cache.

    A year whose fetch fails is logged and skipped. Refreshing inside the
    cooldown is rejected with the remaining wait rather than raised.

    Args:
        source: Where to fetch each year's holidays from
        cached: The currently cached holidays
        last_updated: When the cache was last refreshed, if ever
        now: The current moment
        cooldown_minutes: Minimum interval between refreshes
        today: The local date that decides the refresh window (defaults to now)

    Returns:
        The outcome; on "updated" the caller persists holidays and last_updated
    """
    remaining_seconds = get_cooldown_remaining(last_updated, now, cooldown_minutes)
    if remaining_seconds is not None:
        logger.info("holiday refresh rejected, %ds remaining", remaining_seconds)
        return {
            "status": "rejected",
            "holidays": cached,
            "failed_years": [],
            "remaining_seconds": remaining_seconds,
            "last_updated": last_updated,
        }

    if today is None:
        today = now.date()

    fetched_by_year: dict[int, list[Holiday]] = {}
    failed_years: list[int] = []
    for year in get_refresh_years(today):
        try:
            fetched_by_year[year] = source.fetch(year)
        except HolidayFetchError as e:
            logger.warning("%s", e)
            failed_years.append(year)

    fetched_count = sum(len(holidays) for holidays in fetched_by_year.values())
    if fetched_count == 0:
        logger.warning("holiday refresh fetched nothing, keeping cached list")
        return {
            "status": "empty",
            "holidays": cached,
            "failed_years": failed_years,
            "remaining_seconds": None,
            "last_updated": last_updated,
        }

    merged = merge_holidays(
        cached,
        {year: holidays for year, holidays in fetched_by_year.items() if holidays},
    )
    logger.info(
        "cached %d holidays from %d year(s)", len(merged), len(fetched_by_year)
    )
    return {
        "status": "updated",
        "holidays": merged,
        "failed_years": failed_years,
        "remaining_seconds": None,
        "last_updated": now,
    }
