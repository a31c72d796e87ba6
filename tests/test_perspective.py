# SPDX-License-Identifier: MIT

import pytest

from tandem.color import CATEGORY_COLORS
from tandem.model.category import Category
from tandem.service.perspective import (
    invert_category,
    to_viewer_category,
    to_viewer_perspective,
    to_writer_category,
)
from tandem.service.schedule import resolve_stored_category


class TestInvertCategory:
    @pytest.mark.parametrize(
        "category, expected",
        [
            (Category.MINE, Category.PARTNER),
            (Category.PARTNER, Category.MINE),
            (Category.SHARED, Category.SHARED),
        ],
    )
    def test_invert(self, category, expected):
        assert invert_category(category) == expected


class TestViewerPerspective:
    """Mine always means whoever is looking."""

    def test_writer_sees_stored_category(self, make_schedule):
        schedule = make_schedule("s1", "2024-03-01", writer_id="alice")
        assert to_viewer_perspective(schedule, "alice")["category"] == Category.MINE

    def test_partner_sees_inverted_category(self, make_schedule):
        schedule = make_schedule("s1", "2024-03-01", writer_id="alice")
        assert to_viewer_perspective(schedule, "bob")["category"] == Category.PARTNER

    def test_shared_is_never_inverted(self, make_schedule):
        schedule = make_schedule(
            "s1", "2024-03-01", writer_id="alice", category=Category.SHARED
        )
        assert to_viewer_perspective(schedule, "bob")["category"] == Category.SHARED

    def test_color_follows_final_category(self, make_schedule):
        schedule = make_schedule(
            "s1", "2024-03-01", writer_id="alice", color="#123456"
        )
        entity = to_viewer_perspective(schedule, "bob")
        assert entity["color"] == CATEGORY_COLORS[Category.PARTNER]

    def test_schedule_is_not_modified(self, make_schedule):
        schedule = make_schedule("s1", "2024-03-01", writer_id="alice")
        snapshot = dict(schedule)
        to_viewer_perspective(schedule, "bob")
        assert schedule == snapshot

    def test_entity_is_editable_and_keeps_writer(self, make_schedule):
        entity = to_viewer_perspective(make_schedule("s1", "2024-03-01"), "bob")
        assert entity["editable"] is True
        assert entity["writer_id"] == "alice"
        assert entity["kind"] == "schedule"

    @pytest.mark.parametrize("stored", Category.ALL)
    @pytest.mark.parametrize("viewer", ["alice", "bob"])
    def test_inverse_recovers_stored_category(self, stored, viewer):
        displayed = to_viewer_category(stored, "alice", viewer)
        assert to_writer_category(displayed, "alice", viewer) == stored


class TestEditingAnotherWritersSchedule:
    def test_viewer_choice_is_stored_from_writer_perspective(self, make_schedule):
        schedule = make_schedule(
            "s1", "2024-03-01", writer_id="alice", category=Category.PARTNER
        )

        assert to_viewer_perspective(schedule, "bob")["category"] == Category.MINE
        assert (
            resolve_stored_category(schedule, "bob", Category.MINE)
            == Category.PARTNER
        )

    def test_writer_choice_is_stored_as_is(self, make_schedule):
        schedule = make_schedule("s1", "2024-03-01", writer_id="alice")
        assert (
            resolve_stored_category(schedule, "alice", Category.PARTNER)
            == Category.PARTNER
        )

    def test_shared_choice_is_stored_as_is(self, make_schedule):
        schedule = make_schedule("s1", "2024-03-01", writer_id="alice")
        assert (
            resolve_stored_category(schedule, "bob", Category.SHARED)
            == Category.SHARED
        )

    def test_unknown_category_is_rejected(self, make_schedule):
        schedule = make_schedule("s1", "2024-03-01")
        with pytest.raises(ValueError):
            resolve_stored_category(schedule, "bob", "ours")
