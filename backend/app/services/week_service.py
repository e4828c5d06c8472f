"""Week Service.

Composes the week-at-a-glance view: resolves the week window, reads team
members and the window's holidays from storage, builds the holiday index
for the presence grid and aggregates the week statistics.

Every call re-reads storage and rebuilds its derived structures; nothing
is cached between calls.
"""

import logging
import re
from dataclasses import asdict
from datetime import date

from app.core.exceptions import ReferentialIntegrityError, ValidationError
from app.models.holiday import Holiday
from app.models.team_member import TeamMember
from app.repositories.holiday_repository import HolidayRepository
from app.services.holiday_index import build_index, has_holiday
from app.services.week_aggregator import aggregate
from app.services.week_window import (
    FIRST_NAVIGABLE_DAY,
    LAST_NAVIGABLE_DAY,
    WeekWindow,
    compute_week_window,
    current_week,
    next_week,
    previous_week,
)

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------

def parse_iso_date(value: str, field: str = "date") -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date.

    Time components and offsets are rejected.

    Raises:
        ValidationError: If *value* is not a valid calendar date string.
    """
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValidationError(f"{field} must be a calendar date in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"{field} is not a valid calendar date: {value}") from exc


def parse_reference_date(value: str) -> date:
    """Parse a week reference date whose neighbouring weeks are representable.

    Raises:
        ValidationError: If *value* is malformed or too close to the ends of
            the calendar.
    """
    day = parse_iso_date(value, field="reference_date")
    if not FIRST_NAVIGABLE_DAY <= day <= LAST_NAVIGABLE_DAY:
        raise ValidationError(
            f"reference_date must be between {FIRST_NAVIGABLE_DAY.isoformat()} "
            f"and {LAST_NAVIGABLE_DAY.isoformat()}"
        )
    return day


def normalize_member_name(name: str) -> str:
    """Strip surrounding whitespace and reject empty or overlong names."""
    cleaned = name.strip() if isinstance(name, str) else ""
    if not cleaned:
        raise ValidationError("Name is required")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name must be at most {MAX_NAME_LENGTH} characters")
    return cleaned


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

async def create_team_member(repo: HolidayRepository, name: str) -> TeamMember:
    member = await repo.insert_team_member(normalize_member_name(name))
    logger.info("Team member created id=%s", member.id)
    return member


async def create_holiday(
    repo: HolidayRepository,
    team_member_id: int,
    holiday_date: str,
) -> Holiday:
    """Record one day off for an existing team member.

    The member lookup gives an early, readable failure; the foreign key in
    storage still rejects a member deleted between the lookup and the insert.

    Raises:
        ValidationError: If *holiday_date* is malformed.
        ReferentialIntegrityError: If the team member does not exist.
    """
    day = parse_iso_date(holiday_date, field="holiday_date")
    if await repo.get_team_member(team_member_id) is None:
        raise ReferentialIntegrityError(team_member_id)
    holiday = await repo.insert_holiday(team_member_id, day)
    logger.info(
        "Holiday created id=%s team_member_id=%s date=%s",
        holiday.id, team_member_id, day.isoformat(),
    )
    return holiday


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

async def list_team_members(repo: HolidayRepository) -> list[TeamMember]:
    return await repo.list_team_members()


async def list_holidays(
    repo: HolidayRepository,
    date_from: str | None = None,
    date_to: str | None = None,
) -> list[Holiday]:
    start = parse_iso_date(date_from, field="date_from") if date_from is not None else None
    end = parse_iso_date(date_to, field="date_to") if date_to is not None else None
    return await repo.list_holidays(start, end)


async def get_holidays_for_week(
    repo: HolidayRepository,
    reference_date: str,
) -> tuple[WeekWindow, list[Holiday]]:
    window = compute_week_window(parse_reference_date(reference_date))
    holidays = await repo.list_holidays_in_range(window.start_date, window.end_date)
    return window, holidays


def _day_descriptor(day: date, today: date, holiday_count: int) -> dict:
    return dict(
        date=day,
        weekday=WEEKDAY_NAMES[day.weekday()],
        is_weekend=day.weekday() >= 5,
        is_today=day == today,
        holiday_count=holiday_count,
    )


async def _build_week_view(
    repo: HolidayRepository,
    window: WeekWindow,
    today: date,
) -> dict:
    members = await repo.list_team_members()
    holidays = await repo.list_holidays_in_range(window.start_date, window.end_date)

    index = build_index(holidays)
    days = window.days()
    presence_grid = [
        dict(
            team_member_id=member.id,
            name=member.name,
            days=[has_holiday(index, day, member.id) for day in days],
        )
        for member in members
    ]

    stats = aggregate(members, holidays, window)

    return dict(
        window=dict(start_date=window.start_date, end_date=window.end_date),
        previous_week_start=previous_week(window).start_date,
        next_week_start=next_week(window).start_date,
        days=[
            _day_descriptor(day, today, stats.holidays_by_day.get(day.isoformat(), 0))
            for day in days
        ],
        members=members,
        presence_grid=presence_grid,
        holidays=holidays,
        stats=asdict(stats),
    )


async def get_week_view(
    repo: HolidayRepository,
    reference_date: str,
    today: date | None = None,
) -> dict:
    """Return the materialized view for the week containing *reference_date*.

    Raises:
        ValidationError: If *reference_date* is not ``YYYY-MM-DD`` or lies outside
            the navigable range.
    """
    window = compute_week_window(parse_reference_date(reference_date))
    return await _build_week_view(repo, window, today or date.today())


async def get_current_week_view(
    repo: HolidayRepository,
    today: date | None = None,
) -> dict:
    today = today or date.today()
    return await _build_week_view(repo, current_week(today), today)
