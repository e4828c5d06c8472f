from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories.holiday_repository import HolidayRepository


async def get_holiday_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HolidayRepository:
    """Request-scoped repository bound to the request's database session."""
    return HolidayRepository(db)
