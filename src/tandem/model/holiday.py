# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum


class Holiday(TypedDict):
    date: str
    title: str


class HolidayCache(TypedDict):
    holidays: list[Holiday]
    last_updated: Optional[pendulum.DateTime]


HolidayRefreshStatus = Literal["updated", "rejected", "empty"]


class HolidayRefreshResult(TypedDict):
    status: HolidayRefreshStatus
    holidays: list[Holiday]
    failed_years: list[int]
    remaining_seconds: Optional[int]
    last_updated: Optional[pendulum.DateTime]
