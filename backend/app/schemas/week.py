from datetime import date

from pydantic import BaseModel, ConfigDict

from app.schemas.holiday import HolidayWithTeamMemberResponse
from app.schemas.team_member import TeamMemberResponse


class WeekWindowResponse(BaseModel):
    """Monday-through-Sunday bounds, both inclusive."""

    start_date: date
    end_date: date
    model_config = ConfigDict(from_attributes=True)


class WeekDay(BaseModel):
    """One column of the week grid."""

    date: date
    weekday: str  # Mon..Sun
    is_weekend: bool
    is_today: bool
    holiday_count: int


class PresenceRow(BaseModel):
    """One member's row of the grid; ``days[i]`` is True when off on day i."""

    team_member_id: int
    name: str
    days: list[bool]


class BusiestDay(BaseModel):
    date: date
    count: int


class TopMember(BaseModel):
    team_member_id: int
    name: str | None
    count: int


class WeekStatsResponse(BaseModel):
    total_holidays: int
    total_team_members: int
    busiest_day: BusiestDay | None
    member_with_most_holidays: TopMember | None
    average_holidays_per_member: float
    holidays_by_day: dict[str, int]


class WeekViewResponse(BaseModel):
    """Everything the week-at-a-glance page renders."""

    window: WeekWindowResponse
    previous_week_start: date
    next_week_start: date
    days: list[WeekDay]
    members: list[TeamMemberResponse]
    presence_grid: list[PresenceRow]
    holidays: list[HolidayWithTeamMemberResponse]
    stats: WeekStatsResponse


class WeekHolidaysResponse(BaseModel):
    window: WeekWindowResponse
    holidays: list[HolidayWithTeamMemberResponse]
