# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from tandem.model.entity_id import EntityId


class Schedule(TypedDict):
    """An authored schedule row as stored, category from the writer's perspective."""

    id: Optional[EntityId]
    couple_id: str
    writer_id: str
    title: str
    description: Optional[str]
    start_date: pendulum.Date
    end_date: pendulum.Date
    category: str
    color: str
    created: pendulum.DateTime
    updated: pendulum.DateTime
