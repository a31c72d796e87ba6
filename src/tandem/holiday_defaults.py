# SPDX-License-Identifier: MIT

from tandem.model.holiday import Holiday

# Korean public holidays shipped with the package, used until the first
# successful refresh from the remote source.
DEFAULT_HOLIDAYS: list[Holiday] = [
    {"date": "2025-01-01", "title": "신정"},
    {"date": "2025-01-28", "title": "설날 전날"},
    {"date": "2025-01-29", "title": "설날"},
    {"date": "2025-01-30", "title": "설날 다음날"},
    {"date": "2025-03-01", "title": "삼일절"},
    {"date": "2025-03-03", "title": "대체공휴일"},
    {"date": "2025-05-05", "title": "어린이날 / 부처님오신날"},
    {"date": "2025-05-06", "title": "대체공휴일"},
    {"date": "2025-06-03", "title": "대통령선거일"},
    {"date": "2025-06-06", "title": "현충일"},
    {"date": "2025-08-15", "title": "광복절"},
    {"date": "2025-10-03", "title": "개천절"},
    {"date": "2025-10-05", "title": "추석 전날"},
    {"date": "2025-10-06", "title": "추석"},
    {"date": "2025-10-07", "title": "추석 다음날"},
    {"date": "2025-10-08", "title": "대체공휴일"},
    {"date": "2025-10-09", "title": "한글날"},
    {"date": "2025-12-25", "title": "기독탄신일"},
    {"date": "2026-01-01", "title": "신정"},
    {"date": "2026-02-16", "title": "설날 전날"},
    {"date": "2026-02-17", "title": "설날"},
    {"date": "2026-02-18", "title": "설날 다음날"},
    {"date": "2026-03-01", "title": "삼일절"},
    {"date": "2026-03-02", "title": "대체공휴일"},
    {"date": "2026-05-05", "title": "어린이날"},
    {"date": "2026-05-24", "title": "부처님오신날"},
    {"date": "2026-05-25", "title": "대체공휴일"},
    {"date": "2026-06-03", "title": "전국동시지방선거"},
    {"date": "2026-06-06", "title": "현충일"},
    {"date": "2026-08-15", "title": "광복절"},
    {"date": "2026-08-17", "title": "대체공휴일"},
    {"date": "2026-09-24", "title": "추석 전날"},
    {"date": "2026-09-25", "title": "추석"},
    {"date": "2026-09-26", "title": "추석 다음날"},
    {"date": "2026-10-03", "title": "개천절"},
    {"date": "2026-10-05", "title": "대체공휴일"},
    {"date": "2026-10-09", "title": "한글날"},
    {"date": "2026-12-25", "title": "기독탄신일"},
]
