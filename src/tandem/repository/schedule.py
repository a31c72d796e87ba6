# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tandem import configuration, time
from tandem.model.entity_id import EntityId, generate_entity_id
from tandem.model.schedule import Schedule


class ScheduleRepository:
    def __init__(self) -> None:
        self._schedules: Optional[list[Schedule]] = None
        self.is_dirty = False

    @property
    def schedules(self) -> list[Schedule]:
        if self._schedules is None:
            self.__load_data()
        if self._schedules is None:
            raise ValueError()
        return self._schedules

    def __load_data(self) -> None:
        self._schedules = []
        if not configuration.DATA_SCHEDULES_PATH.is_file():
            return
        raw_data = load(configuration.DATA_SCHEDULES_PATH.read_text(), Loader=Loader)
        if raw_data is None:
            return
        for raw_schedule in raw_data.get("schedules", []):
            self._schedules.append(
                self.__convert_schedule_for_deserialization(raw_schedule)
            )

    def __save_data(self) -> None:
        serializable_schedules = [
            self.__convert_schedule_for_serialization(deepcopy(schedule))
            for schedule in self.schedules
        ]
        configuration.DATA_SCHEDULES_PATH.write_text(
            dump(
                {"schedules": serializable_schedules},
                Dumper=Dumper,
                allow_unicode=True,
            )
        )

    def flush(self) -> bool:
        if self._schedules is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_schedule_for_serialization(
        self, schedule: Schedule
    ) -> dict[str, Any]:
        serializable_schedule = cast(dict[str, Any], schedule)
        serializable_schedule["start_date"] = time.date_to_str(schedule["start_date"])
        serializable_schedule["end_date"] = time.date_to_str(schedule["end_date"])
        serializable_schedule["created"] = time.datetime_to_iso_str(
            schedule["created"]
        )
        serializable_schedule["updated"] = time.datetime_to_iso_str(
            schedule["updated"]
        )
        return serializable_schedule

    def __convert_schedule_for_deserialization(
        self, schedule: dict[str, Any]
    ) -> Schedule:
        deserializable_schedule = schedule
        deserializable_schedule["start_date"] = time.date_from_str(
            str(schedule["start_date"])
        )
        deserializable_schedule["end_date"] = time.date_from_str(
            str(schedule["end_date"])
        )
        deserializable_schedule["created"] = time.datetime_from_str(
            schedule["created"]
        )
        deserializable_schedule["updated"] = time.datetime_from_str(
            schedule["updated"]
        )
        return cast(Schedule, deserializable_schedule)

    def save_new_schedule(self, schedule: Schedule) -> EntityId:
        self.is_dirty = True

        schedule["id"] = generate_entity_id()
        self.schedules.append(schedule)

        return schedule["id"]

    def modify_schedule(
        self,
        id: EntityId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        start_date: Optional[pendulum.Date] = None,
        end_date: Optional[pendulum.Date] = None,
        category: Optional[str] = None,
        color: Optional[str] = None,
        remove_description: bool = False,
    ) -> None:
        self.is_dirty = True

        schedule = self.__find(id)
        schedule["updated"] = time.now_utc()
        if title is not None:
            schedule["title"] = title
        if description is not None:
            schedule["description"] = description
        if start_date is not None:
            schedule["start_date"] = start_date
        if end_date is not None:
            schedule["end_date"] = end_date
        if category is not None:
            schedule["category"] = category
        if color is not None:
            schedule["color"] = color

        if remove_description:
            schedule["description"] = None

    def delete_schedule(self, id: EntityId) -> None:
        self.__find(id)
        self.is_dirty = True
        self._schedules = [
            schedule for schedule in self.schedules if schedule["id"] != id
        ]

    def get_schedule(self, id: EntityId) -> Schedule:
        return deepcopy(self.__find(id))

    def get_schedules_for_couple(self, couple_id: str) -> list[Schedule]:
        return deepcopy(
            [
                schedule
                for schedule in self.schedules
                if schedule["couple_id"] == couple_id
            ]
        )

    def __find(self, id: EntityId) -> Schedule:
        matching_schedules = [
            schedule for schedule in self.schedules if schedule["id"] == id
        ]
        if len(matching_schedules) == 0:
            raise ValueError(f"No schedule with id {id}")
        return matching_schedules[0]


SCHEDULE_REPO = ScheduleRepository()
