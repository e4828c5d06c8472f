"""Holidays router.

Endpoints for recording days off and listing them with their team member.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status

from app.config import settings
from app.core.dependencies import get_holiday_repository
from app.core.rate_limit import limiter
from app.repositories.holiday_repository import HolidayRepository
from app.schemas.holiday import (
    HolidayCreate,
    HolidayResponse,
    HolidayWithTeamMemberResponse,
)
from app.services import week_service

router = APIRouter(prefix="/holidays", tags=["Holidays"])


@router.get("/", response_model=list[HolidayWithTeamMemberResponse])
async def list_holidays(
    repo: Annotated[HolidayRepository, Depends(get_holiday_repository)],
    date_from: str | None = Query(None, description="Filter from date (inclusive, YYYY-MM-DD)"),
    date_to: str | None = Query(None, description="Filter to date (inclusive, YYYY-MM-DD)"),
):
    """List holidays with their team member, ordered by date."""
    return await week_service.list_holidays(repo, date_from, date_to)


@router.post("/", response_model=HolidayResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def create_holiday(
    request: Request,
    body: HolidayCreate,
    repo: Annotated[HolidayRepository, Depends(get_holiday_repository)],
):
    """Record a day off. Answers 404 if the team member does not exist."""
    return await week_service.create_holiday(repo, body.team_member_id, body.holiday_date)
