# SPDX-License-Identifier: MIT

from tandem.color import color_for_category
from tandem.model.category import Category
from tandem.model.schedule import Schedule
from tandem.time import now_utc


def get_schedule_template() -> Schedule:
    now = now_utc()
    today = now.date()
    return {
        "id": None,
        "couple_id": "",
        "writer_id": "",
        "title": "",
        "description": None,
        "start_date": today,
        "end_date": today,
        "category": Category.SHARED,
        "color": color_for_category(Category.SHARED),
        "created": now,
        "updated": now,
    }
