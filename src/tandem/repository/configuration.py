# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tandem import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            loaded = {}

        # Migration: back-fill any setting added after the file was written
        defaults = cast(dict[str, Any], configuration.get_default_configuration())
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value
                self.is_dirty = True

        self._config = cast(configuration.Configuration, loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=Dumper, allow_unicode=True)
        )

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        show_holidays: Optional[bool] = None,
        show_anniversaries: Optional[bool] = None,
        anniversary_date: Optional[str] = None,
        remove_anniversary_date: bool = False,
        couple_id: Optional[str] = None,
        viewer_id: Optional[str] = None,
        holiday_source_url: Optional[str] = None,
        holiday_refresh_cooldown_minutes: Optional[int] = None,
        max_visible_lanes: Optional[int] = None,
        timezone: Optional[str] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if show_holidays is not None:
            self.config["show_holidays"] = show_holidays
        if show_anniversaries is not None:
            self.config["show_anniversaries"] = show_anniversaries
        if anniversary_date is not None:
            self.config["anniversary_date"] = anniversary_date
        if remove_anniversary_date:
            self.config["anniversary_date"] = None
        if couple_id is not None:
            self.config["couple_id"] = couple_id
        if viewer_id is not None:
            self.config["viewer_id"] = viewer_id
        if holiday_source_url is not None:
            self.config["holiday_source_url"] = holiday_source_url
        if holiday_refresh_cooldown_minutes is not None:
            self.config["holiday_refresh_cooldown_minutes"] = (
                holiday_refresh_cooldown_minutes
            )
        if max_visible_lanes is not None:
            self.config["max_visible_lanes"] = max_visible_lanes
        if timezone is not None:
            self.config["timezone"] = timezone
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
