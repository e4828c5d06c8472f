"""Week Aggregator.

Summary statistics for one week of holidays: totals, the busiest day,
the member with the most days off and the per-member average.

Ties are broken explicitly rather than by iteration order:

- busiest day: the earliest date among those sharing the highest count
- top member: the smallest member id among those sharing the highest count
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from app.services.holiday_index import HolidayLike, date_key
from app.services.week_window import WeekWindow


class MemberLike(Protocol):
    id: int
    name: str


@dataclass(frozen=True)
class DayCount:
    date: date
    count: int


@dataclass(frozen=True)
class MemberCount:
    team_member_id: int
    name: str | None
    count: int


@dataclass(frozen=True)
class WeekStats:
    total_holidays: int
    total_team_members: int
    busiest_day: DayCount | None
    member_with_most_holidays: MemberCount | None
    average_holidays_per_member: float
    holidays_by_day: dict[str, int] = field(default_factory=dict)


def _busiest_day(per_day: Counter[str]) -> DayCount | None:
    if not per_day:
        return None
    key, count = min(per_day.items(), key=lambda item: (-item[1], item[0]))
    return DayCount(date=date.fromisoformat(key), count=count)


def _top_member(
    per_member: Counter[int],
    team_members: Sequence[MemberLike],
) -> MemberCount | None:
    if not per_member:
        return None
    member_id, count = min(per_member.items(), key=lambda item: (-item[1], item[0]))
    names = {member.id: member.name for member in team_members}
    return MemberCount(team_member_id=member_id, name=names.get(member_id), count=count)


def aggregate(
    team_members: Sequence[MemberLike],
    holidays: Sequence[HolidayLike],
    window: WeekWindow,
) -> WeekStats:
    """Compute week statistics in a single pass over *holidays*.

    *holidays* is taken as given; totals count every record, including
    duplicates for the same member and day. Members without a holiday
    still count towards the average.
    """
    per_day: Counter[str] = Counter()
    per_member: Counter[int] = Counter()
    for holiday in holidays:
        per_day[date_key(holiday.holiday_date)] += 1
        per_member[holiday.team_member_id] += 1

    holidays_by_day = {date_key(day): 0 for day in window.days()}
    for key in sorted(per_day):
        holidays_by_day[key] = per_day[key]

    total_holidays = len(holidays)
    total_members = len(team_members)
    average = total_holidays / total_members if total_members else 0.0

    return WeekStats(
        total_holidays=total_holidays,
        total_team_members=total_members,
        busiest_day=_busiest_day(per_day),
        member_with_most_holidays=_top_member(per_member, team_members),
        average_holidays_per_member=average,
        holidays_by_day=holidays_by_day,
    )
