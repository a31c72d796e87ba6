# SPDX-License-Identifier: MIT

import re
from contextvars import ContextVar
from typing import Optional, cast

import pendulum

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Set from the configured timezone at startup
_local_timezone_var: ContextVar[str] = ContextVar("local_timezone", default="local")


def set_local_timezone(tz: str) -> None:
    _local_timezone_var.set(tz)


def get_local_timezone() -> str:
    return _local_timezone_var.get()


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today(tz: Optional[str] = None) -> pendulum.Date:
    if tz is None:
        tz = get_local_timezone()
    return pendulum.now(tz).date()


def date_to_str(date: pendulum.Date) -> str:
    """Serialize a date to the fixed-width 'YYYY-MM-DD' form."""
    return date.to_date_string()


def date_to_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_str(date)


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a zero-padded 'YYYY-MM-DD' string into a pendulum.Date.

    Raises:
        ValueError: If the string is not exactly in 'YYYY-MM-DD' form or is
            not a real calendar date
    """
    if not _DATE_PATTERN.match(date_str):
        raise ValueError(f"Date must be in YYYY-MM-DD format, got '{date_str}'")
    year, month, day = (int(part) for part in date_str.split("-"))
    try:
        return pendulum.date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Invalid date '{date_str}': {e}") from e


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    if date_str is None:
        return None
    return date_from_str(date_str)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def date_rolled(year: int, month: int, day: int) -> pendulum.Date:
    """Build a date, rolling an out-of-range day into the following month.

    February 29 in a non-leap year becomes March 1.
    """
    return pendulum.date(year, month, 1).add(days=day - 1)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")
