# SPDX-License-Identifier: MIT

import pendulum

from tandem.configuration import Configuration
from tandem.model.entity import DateRangeEntity
from tandem.repository.holiday import HOLIDAY_REPO
from tandem.repository.schedule import SCHEDULE_REPO
from tandem.service.timeline import TimelineComposer
from tandem.time import date_from_str_optional, today

_composer = TimelineComposer()


def get_today(config: Configuration) -> pendulum.Date:
    return today(config["timezone"])


def load_timeline(config: Configuration) -> list[DateRangeEntity]:
    """Compose the viewer's timeline from scratch out of the current stores."""
    _composer.set_anniversary_date(date_from_str_optional(config["anniversary_date"]))
    return _composer.compose(
        schedules=SCHEDULE_REPO.get_schedules_for_couple(config["couple_id"]),
        viewer_id=config["viewer_id"],
        holidays=HOLIDAY_REPO.get_holidays(),
        today=get_today(config),
        show_holidays=config["show_holidays"],
        show_anniversaries=config["show_anniversaries"],
    )
