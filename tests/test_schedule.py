# SPDX-License-Identifier: MIT

import pendulum
import pytest

from tandem.color import CATEGORY_COLORS
from tandem.model.category import Category
from tandem.repository.schedule import ScheduleRepository
from tandem.service.schedule import (
    InvalidDateRangeError,
    build_new_schedule,
    validate_date_range,
    validate_schedule_update,
)


class TestDateRangeValidation:
    def test_end_before_start_is_rejected(self):
        with pytest.raises(InvalidDateRangeError) as excinfo:
            validate_date_range(pendulum.date(2024, 3, 5), pendulum.date(2024, 3, 4))
        assert "2024-03-04" in str(excinfo.value)

    def test_single_day_is_valid(self):
        validate_date_range(pendulum.date(2024, 3, 5), pendulum.date(2024, 3, 5))

    def test_update_checks_resulting_range(self, make_schedule):
        schedule = make_schedule("s1", "2024-03-05", "2024-03-10")
        with pytest.raises(InvalidDateRangeError):
            validate_schedule_update(schedule, pendulum.date(2024, 3, 11), None)
        validate_schedule_update(schedule, None, pendulum.date(2024, 3, 6))


class TestBuildNewSchedule:
    def test_defaults_to_single_day(self):
        schedule = build_new_schedule(
            "couple-1", "alice", "dentist", pendulum.date(2024, 3, 5)
        )
        assert schedule["end_date"] == schedule["start_date"]
        assert schedule["category"] == Category.SHARED
        assert schedule["color"] == CATEGORY_COLORS[Category.SHARED]
        assert schedule["writer_id"] == "alice"
        assert schedule["id"] is None

    def test_color_follows_category(self):
        schedule = build_new_schedule(
            "couple-1",
            "alice",
            "trip",
            pendulum.date(2024, 3, 5),
            pendulum.date(2024, 3, 8),
            category=Category.MINE,
        )
        assert schedule["color"] == CATEGORY_COLORS[Category.MINE]

    def test_invalid_range_is_rejected(self):
        with pytest.raises(InvalidDateRangeError):
            build_new_schedule(
                "couple-1",
                "alice",
                "trip",
                pendulum.date(2024, 3, 5),
                pendulum.date(2024, 3, 1),
            )

    def test_unknown_category_is_rejected(self):
        with pytest.raises(ValueError):
            build_new_schedule(
                "couple-1", "alice", "trip", pendulum.date(2024, 3, 5), category="ours"
            )


class TestScheduleRepository:
    """CRUD against a temporary data directory."""

    def test_create_flush_and_reload(self, data_dir):
        repository = ScheduleRepository()
        schedule = build_new_schedule(
            "couple-1",
            "alice",
            "여행",
            pendulum.date(2024, 3, 5),
            pendulum.date(2024, 3, 8),
            category=Category.MINE,
        )
        id = repository.save_new_schedule(schedule)
        assert repository.flush() is True
        assert (data_dir / "schedules.yaml").is_file()

        reloaded = ScheduleRepository().get_schedule(id)
        assert reloaded["title"] == "여행"
        assert reloaded["start_date"] == pendulum.date(2024, 3, 5)
        assert reloaded["end_date"] == pendulum.date(2024, 3, 8)
        assert reloaded["category"] == Category.MINE
        assert reloaded["writer_id"] == "alice"

    def test_list_filters_by_couple(self, data_dir):
        repository = ScheduleRepository()
        for couple_id in ["couple-1", "couple-2", "couple-1"]:
            repository.save_new_schedule(
                build_new_schedule(couple_id, "alice", "x", pendulum.date(2024, 3, 5))
            )
        assert len(repository.get_schedules_for_couple("couple-1")) == 2
        assert len(repository.get_schedules_for_couple("couple-3")) == 0

    def test_modify_and_delete(self, data_dir):
        repository = ScheduleRepository()
        id = repository.save_new_schedule(
            build_new_schedule("couple-1", "alice", "x", pendulum.date(2024, 3, 5))
        )

        repository.modify_schedule(
            id, title="y", end_date=pendulum.date(2024, 3, 7), category=Category.MINE
        )
        modified = repository.get_schedule(id)
        assert modified["title"] == "y"
        assert modified["end_date"] == pendulum.date(2024, 3, 7)
        assert modified["category"] == Category.MINE

        repository.delete_schedule(id)
        with pytest.raises(ValueError):
            repository.get_schedule(id)

    def test_returned_rows_are_copies(self, data_dir):
        repository = ScheduleRepository()
        id = repository.save_new_schedule(
            build_new_schedule("couple-1", "alice", "x", pendulum.date(2024, 3, 5))
        )
        repository.get_schedule(id)["title"] = "changed"
        assert repository.get_schedule(id)["title"] == "x"

    def test_unknown_id_is_rejected(self, data_dir):
        with pytest.raises(ValueError):
            ScheduleRepository().delete_schedule("missing")
