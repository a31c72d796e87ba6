# SPDX-License-Identifier: MIT

import random

import pendulum
import pytest

from tandem.model.layout import PlacedEntity
from tandem.service.lane import allocate_lanes, layout_month, sort_for_placement
from tandem.service.week import build_month_weeks
from tandem.time import date_to_str


def _week_containing(weeks, date_str):
    for week in weeks:
        if date_to_str(week["week_start"]) <= date_str <= date_to_str(week["week_end"]):
            return week
    raise AssertionError(f"no week row contains {date_str}")


def _by_id(placements: list[PlacedEntity]) -> dict[str, PlacedEntity]:
    return {p["entity"]["id"]: p for p in placements}


class TestAllocateLanes:
    """Lane assignment inside a single week row."""

    def test_overlapping_entities_get_separate_lanes(self, make_entity):
        entities = [
            make_entity("b", "2024-03-04", "2024-03-10"),
            make_entity("a", "2024-03-01", "2024-03-05"),
        ]
        week = _week_containing(build_month_weeks(2024, 3, entities), "2024-03-03")
        assert week["week_start"] == pendulum.date(2024, 3, 3)
        assert week["week_end"] == pendulum.date(2024, 3, 9)

        placed = _by_id(allocate_lanes(week))

        assert placed["a"]["lane_index"] == 0
        assert placed["a"]["start_col"] == 0
        assert placed["a"]["end_col"] == 2
        assert placed["a"]["is_segment_start"] is False
        assert placed["a"]["is_segment_end"] is True

        assert placed["b"]["lane_index"] == 1
        assert placed["b"]["start_col"] == 1
        assert placed["b"]["end_col"] == 6
        assert placed["b"]["is_segment_start"] is True
        assert placed["b"]["is_segment_end"] is False

    def test_lane_is_reused_once_freed(self, make_entity):
        entities = [
            make_entity("first", "2024-03-03", "2024-03-04"),
            make_entity("second", "2024-03-05", "2024-03-06"),
        ]
        week = _week_containing(build_month_weeks(2024, 3, entities), "2024-03-03")

        placed = _by_id(allocate_lanes(week))

        assert placed["first"]["lane_index"] == 0
        assert placed["second"]["lane_index"] == 0

    def test_touching_end_and_start_do_not_share_a_lane(self, make_entity):
        # Dates are inclusive, so ending on the 5th occupies the 5th
        entities = [
            make_entity("first", "2024-03-03", "2024-03-05"),
            make_entity("second", "2024-03-05", "2024-03-06"),
        ]
        week = _week_containing(build_month_weeks(2024, 3, entities), "2024-03-03")

        placed = _by_id(allocate_lanes(week))

        assert placed["second"]["lane_index"] == 1

    def test_longer_entity_claims_lane_first_on_same_start(self, make_entity):
        entities = [
            make_entity("short", "2024-03-04"),
            make_entity("long", "2024-03-04", "2024-03-08"),
        ]
        week = _week_containing(build_month_weeks(2024, 3, entities), "2024-03-04")

        placed = _by_id(allocate_lanes(week))

        assert placed["long"]["lane_index"] == 0
        assert placed["short"]["lane_index"] == 1

    def test_equal_entities_are_ordered_by_id(self, make_entity):
        entities = [
            make_entity("b", "2024-03-04"),
            make_entity("a", "2024-03-04"),
        ]
        ordered = sort_for_placement(entities)
        assert [entity["id"] for entity in ordered] == ["a", "b"]

    def test_no_lane_cap(self, make_entity):
        entities = [make_entity(f"e{i}", "2024-03-04") for i in range(10)]
        week = _week_containing(build_month_weeks(2024, 3, entities), "2024-03-04")

        lanes = sorted(p["lane_index"] for p in allocate_lanes(week))

        assert lanes == list(range(10))

    def test_input_entities_are_not_mutated(self, make_entity):
        entity = make_entity("a", "2024-03-01", "2024-03-20")
        snapshot = dict(entity)
        layout_month(2024, 3, [entity])
        assert entity == snapshot


class TestContinuity:
    """A bar spanning several weeks is capped only at its true ends."""

    def test_three_week_entity(self, make_entity):
        entity = make_entity("trip", "2024-03-06", "2024-03-20")
        layouts = layout_month(2024, 3, [entity])

        segments = [
            placement
            for layout in layouts
            for placement in layout["placements"]
            if placement["entity"]["id"] == "trip"
        ]

        assert len(segments) == 3
        assert [s["is_segment_start"] for s in segments] == [True, False, False]
        assert [s["is_segment_end"] for s in segments] == [False, False, True]
        assert (segments[0]["start_col"], segments[0]["end_col"]) == (3, 6)
        assert (segments[1]["start_col"], segments[1]["end_col"]) == (0, 6)
        assert (segments[2]["start_col"], segments[2]["end_col"]) == (0, 3)

    def test_entity_crossing_month_boundary_in_filler_days(self, make_entity):
        entity = make_entity("late", "2024-03-30", "2024-04-02")
        layouts = layout_month(2024, 3, [entity])

        last_week = layouts[-1]
        assert last_week["week"]["week_start"] == pendulum.date(2024, 3, 31)
        placement = last_week["placements"][0]
        assert placement["start_col"] == 0
        assert placement["end_col"] == 2
        assert placement["is_segment_start"] is False
        assert placement["is_segment_end"] is True


class TestLaneProperties:
    """Non-overlap and minimality over many generated layouts."""

    @pytest.fixture
    def random_entities(self, make_entity):
        rng = random.Random(20240301)
        base = pendulum.date(2024, 2, 20)
        entities = []
        for i in range(40):
            start = base.add(days=rng.randint(0, 50))
            end = start.add(days=rng.choice([0, 0, 0, 1, 2, 4, 9, 16]))
            entities.append(make_entity(f"e{i:02d}", date_to_str(start), date_to_str(end)))
        return entities

    def test_same_lane_ranges_never_overlap(self, random_entities):
        for layout in layout_month(2024, 3, random_entities):
            week = layout["week"]
            by_lane: dict[int, list[tuple[pendulum.Date, pendulum.Date]]] = {}
            for placement in layout["placements"]:
                entity = placement["entity"]
                clipped = (
                    max(entity["start_date"], week["week_start"]),
                    min(entity["end_date"], week["week_end"]),
                )
                by_lane.setdefault(placement["lane_index"], []).append(clipped)

            for ranges in by_lane.values():
                ranges.sort()
                for previous, current in zip(ranges, ranges[1:]):
                    assert previous[1] < current[0]

    def test_lowest_free_lane_is_always_taken(self, random_entities):
        for layout in layout_month(2024, 3, random_entities):
            lane_ends: dict[int, pendulum.Date] = {}
            for placement in layout["placements"]:
                start = placement["entity"]["start_date"]
                for lower in range(placement["lane_index"]):
                    assert lane_ends[lower] >= start
                lane_ends[placement["lane_index"]] = placement["entity"]["end_date"]

    def test_lane_count_matches_placements(self, random_entities):
        for layout in layout_month(2024, 3, random_entities):
            lanes = {p["lane_index"] for p in layout["placements"]}
            assert layout["lane_count"] == len(lanes)
            assert lanes == set(range(layout["lane_count"]))
