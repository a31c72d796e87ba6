# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Callable, Iterator, Optional

import pendulum
import pytest

from tandem import configuration
from tandem.model.category import Category
from tandem.model.entity import DateRangeEntity
from tandem.model.entity_kind import EntityKind
from tandem.model.schedule import Schedule
from tandem.time import date_from_str

EntityFactory = Callable[..., DateRangeEntity]
ScheduleFactory = Callable[..., Schedule]


@pytest.fixture
def make_entity() -> EntityFactory:
    """Build a display entity from 'YYYY-MM-DD' strings."""

    def _make(
        id: str, start: str, end: Optional[str] = None, title: Optional[str] = None
    ) -> DateRangeEntity:
        return {
            "id": id,
            "kind": EntityKind.SCHEDULE,
            "title": title or id,
            "description": None,
            "start_date": date_from_str(start),
            "end_date": date_from_str(end or start),
            "color": "#C4B5FD",
            "category": Category.SHARED,
            "editable": True,
            "writer_id": "alice",
        }

    return _make


@pytest.fixture
def make_schedule() -> ScheduleFactory:
    """Build a stored schedule row from 'YYYY-MM-DD' strings."""

    def _make(
        id: str,
        start: str,
        end: Optional[str] = None,
        writer_id: str = "alice",
        category: str = Category.MINE,
        title: Optional[str] = None,
        description: Optional[str] = None,
        color: str = "#000000",
    ) -> Schedule:
        now = pendulum.datetime(2024, 1, 1, tz="UTC")
        return {
            "id": id,
            "couple_id": "couple-1",
            "writer_id": writer_id,
            "title": title or id,
            "description": description,
            "start_date": date_from_str(start),
            "end_date": date_from_str(end or start),
            "category": category,
            "color": color,
            "created": now,
            "updated": now,
        }

    return _make


@pytest.fixture
def data_dir(tmp_path: Path) -> Iterator[Path]:
    """Point every data file at a temporary directory for the test."""
    original = configuration.DATA_PATH
    configuration.set_data_path(tmp_path)
    yield tmp_path
    configuration.set_data_path(original)
