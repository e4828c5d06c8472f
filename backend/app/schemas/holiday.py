from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from app.schemas.team_member import TeamMemberResponse


class HolidayCreate(BaseModel):
    team_member_id: int
    holiday_date: str  # YYYY-MM-DD, validated by the week service


class HolidayResponse(BaseModel):
    id: int
    team_member_id: int
    holiday_date: date
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class HolidayWithTeamMemberResponse(HolidayResponse):
    team_member: TeamMemberResponse
