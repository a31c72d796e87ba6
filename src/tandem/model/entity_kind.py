# SPDX-License-Identifier: MIT


class EntityKind:
    SCHEDULE = "schedule"
    HOLIDAY = "holiday"
    ANNIVERSARY = "anniversary"
