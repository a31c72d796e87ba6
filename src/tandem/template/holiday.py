# SPDX-License-Identifier: MIT

from tandem.model.holiday import HolidayCache


def get_holiday_cache_template() -> HolidayCache:
    return {
        "holidays": [],
        "last_updated": None,
    }
