# SPDX-License-Identifier: MIT

import pendulum
import pytest

from tandem.service.week import build_month_days, build_month_weeks, entities_in_week


class TestMonthGrid:
    """Sunday-first grid with filler days from adjacent months."""

    @pytest.mark.parametrize(
        "year, month, expected_rows",
        [
            (2024, 3, 6),  # starts on a Friday, 31 days
            (2024, 9, 5),  # starts on a Sunday, 30 days
            (2026, 2, 4),  # starts on a Sunday, 28 days
        ],
    )
    def test_row_count(self, year, month, expected_rows):
        weeks = build_month_weeks(year, month, [])
        assert len(weeks) == expected_rows
        assert all(len(week["days"]) == 7 for week in weeks)

    def test_leading_and_trailing_filler(self):
        days = build_month_days(2024, 3)

        assert days[0]["date"] == pendulum.date(2024, 2, 25)
        assert days[0]["in_month"] is False
        assert days[5]["date"] == pendulum.date(2024, 3, 1)
        assert days[5]["in_month"] is True
        assert days[-1]["date"] == pendulum.date(2024, 4, 6)
        assert days[-1]["in_month"] is False

    def test_rows_start_on_sunday(self):
        for week in build_month_weeks(2024, 3, []):
            assert week["week_start"].isoweekday() == 7
            assert week["week_end"].isoweekday() == 6

    def test_days_are_consecutive(self):
        days = build_month_days(2024, 12)
        for previous, current in zip(days, days[1:]):
            assert previous["date"].add(days=1) == current["date"]

    def test_no_filler_month(self):
        days = build_month_days(2026, 2)
        assert len(days) == 28
        assert all(day["in_month"] for day in days)


class TestBucketing:
    """Entities are selected per row by range intersection."""

    def test_entity_appears_in_every_intersecting_row(self, make_entity):
        trip = make_entity("trip", "2024-03-06", "2024-03-20")
        weeks = build_month_weeks(2024, 3, [trip])

        rows_with_trip = [
            week["index"] for week in weeks if trip in week["entities"]
        ]

        assert rows_with_trip == [1, 2, 3]

    def test_filler_days_collect_adjacent_month_entities(self, make_entity):
        february = make_entity("feb", "2024-02-26")
        april = make_entity("apr", "2024-04-05")
        weeks = build_month_weeks(2024, 3, [february, april])

        assert weeks[0]["entities"] == [february]
        assert weeks[-1]["entities"] == [april]

    def test_boundaries_are_inclusive(self, make_entity):
        ends_on_start = make_entity("a", "2024-03-01", "2024-03-03")
        starts_on_end = make_entity("b", "2024-03-09", "2024-03-12")
        outside = make_entity("c", "2024-03-10")

        selected = entities_in_week(
            [ends_on_start, starts_on_end, outside],
            pendulum.date(2024, 3, 3),
            pendulum.date(2024, 3, 9),
        )

        assert [entity["id"] for entity in selected] == ["a", "b"]
