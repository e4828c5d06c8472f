from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TeamMemberCreate(BaseModel):
    name: str


class TeamMemberResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
