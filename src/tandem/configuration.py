# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "tandem"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_SCHEDULES_PATH: Path = DATA_PATH / "schedules.yaml"
DATA_HOLIDAYS_PATH: Path = DATA_PATH / "holidays.yaml"

DEFAULT_HOLIDAY_SOURCE_URL = "https://holidays.hyunbin.page/"
DEFAULT_HOLIDAY_REFRESH_COOLDOWN_MINUTES = 5
DEFAULT_MAX_VISIBLE_LANES = 3
DEFAULT_TIMEZONE = "Asia/Seoul"
DEFAULT_LOG_LEVEL = "WARNING"


class Configuration(TypedDict):
    show_header: bool
    show_holidays: bool
    show_anniversaries: bool
    anniversary_date: Optional[str]
    couple_id: str
    viewer_id: str
    holiday_source_url: str
    holiday_refresh_cooldown_minutes: int
    max_visible_lanes: int
    timezone: str
    data_path: Optional[str]
    log_level: NotRequired[str]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "show_holidays": True,
        "show_anniversaries": True,
        "anniversary_date": None,
        "couple_id": "default",
        "viewer_id": "me",
        "holiday_source_url": DEFAULT_HOLIDAY_SOURCE_URL,
        "holiday_refresh_cooldown_minutes": DEFAULT_HOLIDAY_REFRESH_COOLDOWN_MINUTES,
        "max_visible_lanes": DEFAULT_MAX_VISIBLE_LANES,
        "timezone": DEFAULT_TIMEZONE,
        "data_path": None,
        "log_level": DEFAULT_LOG_LEVEL,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_SCHEDULES_PATH, DATA_HOLIDAYS_PATH

    DATA_PATH = data_path
    DATA_SCHEDULES_PATH = DATA_PATH / "schedules.yaml"
    DATA_HOLIDAYS_PATH = DATA_PATH / "holidays.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
