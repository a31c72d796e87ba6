# SPDX-License-Identifier: MIT

from tandem.model.category import Category

CATEGORY_COLORS: dict[str, str] = {
    Category.MINE: "#FDA4AF",
    Category.PARTNER: "#7DD3FC",
    Category.SHARED: "#C4B5FD",
}

HOLIDAY_COLOR = "#EF4444"
ANNIVERSARY_COLOR = "#818CF8"

# Rich styles for calendar chrome
TODAY_COLOR = "bold white on #F43F5E"
OUTSIDE_MONTH_COLOR = "bright_black"
OVERFLOW_COLOR = "bright_black"


def color_for_category(category: str) -> str:
    return CATEGORY_COLORS[category]
