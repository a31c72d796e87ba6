# SPDX-License-Identifier: MIT

from tandem.color import color_for_category
from tandem.model.category import Category
from tandem.model.entity import DateRangeEntity
from tandem.model.entity_kind import EntityKind
from tandem.model.schedule import Schedule


def invert_category(category: str) -> str:
    """Swap mine and partner. Shared is the same from either side."""
    if category == Category.MINE:
        return Category.PARTNER
    if category == Category.PARTNER:
        return Category.MINE
    return category


def to_viewer_category(category: str, writer_id: str, viewer_id: str) -> str:
    if category == Category.SHARED or writer_id == viewer_id:
        return category
    return invert_category(category)


def to_writer_category(category: str, writer_id: str, viewer_id: str) -> str:
    """Inverse of to_viewer_category: the value to persist for the writer."""
    # Inversion is its own inverse
    return to_viewer_category(category, writer_id, viewer_id)


def to_viewer_perspective(schedule: Schedule, viewer_id: str) -> DateRangeEntity:
    """
    Re-label a stored schedule so that "mine" means the viewer.

    The stored color is ignored and recomputed from the final category.

    Args:
        schedule: The stored schedule, category from its writer's perspective
        viewer_id: Identity of the participant looking at the calendar

    Returns:
        A new entity; the schedule itself is not modified
    """
    category = to_viewer_category(
        schedule["category"], schedule["writer_id"], viewer_id
    )
    return {
        "id": str(schedule["id"]),
        "kind": EntityKind.SCHEDULE,
        "title": schedule["title"],
        "description": schedule["description"],
        "start_date": schedule["start_date"],
        "end_date": schedule["end_date"],
        "color": color_for_category(category),
        "category": category,
        "editable": True,
        "writer_id": schedule["writer_id"],
    }
