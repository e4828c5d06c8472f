"""Weeks router.

Week-at-a-glance endpoints: presence grid, holidays and statistics for the
Monday-through-Sunday week containing a reference date.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.dependencies import get_holiday_repository
from app.repositories.holiday_repository import HolidayRepository
from app.schemas.week import WeekHolidaysResponse, WeekViewResponse
from app.services import week_service

router = APIRouter(prefix="/weeks", tags=["Weeks"])


@router.get("/current", response_model=WeekViewResponse)
async def current_week_view(
    repo: Annotated[HolidayRepository, Depends(get_holiday_repository)],
) -> WeekViewResponse:
    """Return the view for the week containing today."""
    view = await week_service.get_current_week_view(repo)
    return WeekViewResponse.model_validate(view, from_attributes=True)


@router.get("/{reference_date}", response_model=WeekViewResponse)
async def week_view(
    reference_date: str,
    repo: Annotated[HolidayRepository, Depends(get_holiday_repository)],
) -> WeekViewResponse:
    """Return the view for the week containing *reference_date* (YYYY-MM-DD)."""
    view = await week_service.get_week_view(repo, reference_date)
    return WeekViewResponse.model_validate(view, from_attributes=True)


@router.get("/{reference_date}/holidays", response_model=WeekHolidaysResponse)
async def week_holidays(
    reference_date: str,
    repo: Annotated[HolidayRepository, Depends(get_holiday_repository)],
) -> WeekHolidaysResponse:
    """Return the holidays of the week containing *reference_date*."""
    window, holidays = await week_service.get_holidays_for_week(repo, reference_date)
    return WeekHolidaysResponse.model_validate(
        {"window": window, "holidays": holidays}, from_attributes=True,
    )
