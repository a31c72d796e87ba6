# SPDX-License-Identifier: MIT


class Category:
    MINE = "mine"
    PARTNER = "partner"
    SHARED = "shared"

    ALL = (MINE, PARTNER, SHARED)


CATEGORY_LABELS: dict[str, str] = {
    Category.MINE: "me",
    Category.PARTNER: "partner",
    Category.SHARED: "us",
}
