# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class DateRangeEntity(TypedDict):
    id: str
    kind: str
    title: str
    description: Optional[str]
    start_date: pendulum.Date
    end_date: pendulum.Date
    color: str
    category: str
    editable: bool
    writer_id: Optional[str]
