# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tandem import configuration, time
from tandem.holiday_defaults import DEFAULT_HOLIDAYS
from tandem.model.holiday import Holiday, HolidayCache
from tandem.template.holiday import get_holiday_cache_template


class HolidayRepository:
    """Locally cached holiday list, falling back to the bundled defaults."""

    def __init__(self) -> None:
        self._cache: Optional[HolidayCache] = None
        self.is_dirty = False

    @property
    def cache(self) -> HolidayCache:
        if self._cache is None:
            self.__load_data()
        if self._cache is None:
            raise ValueError()
        return self._cache

    def __load_data(self) -> None:
        self._cache = get_holiday_cache_template()
        self._cache["holidays"] = deepcopy(DEFAULT_HOLIDAYS)

        if not configuration.DATA_HOLIDAYS_PATH.is_file():
            return
        raw_data = load(configuration.DATA_HOLIDAYS_PATH.read_text(), Loader=Loader)
        if raw_data is None:
            return

        holidays = raw_data.get("holidays")
        if holidays:
            self._cache["holidays"] = [
                {"date": str(holiday["date"]), "title": str(holiday["title"])}
                for holiday in holidays
            ]
        self._cache["last_updated"] = time.datetime_from_str_optional(
            raw_data.get("last_updated")
        )

    def __save_data(self) -> None:
        serializable_cache: dict[str, Any] = {
            "holidays": self.cache["holidays"],
            "last_updated": time.datetime_to_iso_str_optional(
                self.cache["last_updated"]
            ),
        }
        configuration.DATA_HOLIDAYS_PATH.write_text(
            dump(serializable_cache, Dumper=Dumper, allow_unicode=True)
        )

    def flush(self) -> bool:
        if self._cache is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def get_holidays(self) -> list[Holiday]:
        return deepcopy(self.cache["holidays"])

    def get_last_updated(self) -> Optional[pendulum.DateTime]:
        return self.cache["last_updated"]

    def replace_holidays(
        self, holidays: list[Holiday], last_updated: pendulum.DateTime
    ) -> None:
        self.is_dirty = True
        self.cache["holidays"] = deepcopy(holidays)
        self.cache["last_updated"] = last_updated


HOLIDAY_REPO = HolidayRepository()
