# SPDX-License-Identifier: MIT

import atexit

from tandem.repository.configuration import CONFIGURATION_REPO
from tandem.repository.holiday import HOLIDAY_REPO
from tandem.repository.schedule import SCHEDULE_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    SCHEDULE_REPO.flush()
    HOLIDAY_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
