# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from tandem.model.category import Category
from tandem.time import date_from_str, today

_CATEGORY_ALIASES: dict[str, str] = {
    "mine": Category.MINE,
    "me": Category.MINE,
    "m": Category.MINE,
    "partner": Category.PARTNER,
    "p": Category.PARTNER,
    "shared": Category.SHARED,
    "us": Category.SHARED,
    "s": Category.SHARED,
}


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(str(e))

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today().add(days=int(date))

    if date == "today" or date == "t":
        return today()
    if date == "yesterday" or date == "y":
        return today().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_month(month_param: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a month in YYYY-MM format.

    Returns:
        Tuple of (year, month) or None if month_param is None

    Raises:
        typer.BadParameter: If the format is invalid or the month is out of range
    """
    if month_param is None:
        return None

    month_match = re.match(r"^(\d{4})-(\d{1,2})$", month_param)
    if not month_match:
        raise typer.BadParameter(
            f"Month must be in YYYY-MM format (e.g., 2024-03), got '{month_param}'"
        )

    year = int(month_match.group(1))
    month = int(month_match.group(2))
    if month < 1 or month > 12:
        raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")

    return (year, month)


def parse_category(category_param: Optional[str]) -> Optional[str]:
    if category_param is None:
        return None

    category = _CATEGORY_ALIASES.get(category_param.strip().lower())
    if category is None:
        raise typer.BadParameter(
            f"Category must be one of mine, partner, shared, got '{category_param}'"
        )
    return category
