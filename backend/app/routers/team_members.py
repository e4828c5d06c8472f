"""Team Members router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from app.config import settings
from app.core.dependencies import get_holiday_repository
from app.core.rate_limit import limiter
from app.repositories.holiday_repository import HolidayRepository
from app.schemas.team_member import TeamMemberCreate, TeamMemberResponse
from app.services import week_service

router = APIRouter(prefix="/team-members", tags=["Team Members"])


@router.get("/", response_model=list[TeamMemberResponse])
async def list_team_members(
    repo: Annotated[HolidayRepository, Depends(get_holiday_repository)],
):
    """List all team members, oldest first."""
    return await week_service.list_team_members(repo)


@router.post("/", response_model=TeamMemberResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def create_team_member(
    request: Request,
    body: TeamMemberCreate,
    repo: Annotated[HolidayRepository, Depends(get_holiday_repository)],
):
    """Add a team member. The name must not be blank."""
    return await week_service.create_team_member(repo, body.name)
