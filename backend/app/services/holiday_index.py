"""Holiday Index.

Transient ``date key -> {member ids}`` lookup built once per query, so the
presence grid can answer "is this member off on this day" in O(1).
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date, datetime
from typing import Protocol


class HolidayLike(Protocol):
    team_member_id: int
    holiday_date: date


HolidayIndex = dict[str, set[int]]


def date_key(value: date | datetime) -> str:
    """Render the calendar date of *value* as ``YYYY-MM-DD``.

    Datetimes are truncated to their own date, never converted between
    time zones.
    """
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def build_index(holidays: Iterable[HolidayLike]) -> HolidayIndex:
    """Group member ids by holiday date. Duplicate records collapse."""
    index: defaultdict[str, set[int]] = defaultdict(set)
    for holiday in holidays:
        index[date_key(holiday.holiday_date)].add(holiday.team_member_id)
    return dict(index)


def has_holiday(index: HolidayIndex, day: date | datetime, member_id: int) -> bool:
    members = index.get(date_key(day))
    return members is not None and member_id in members
