"""Data-access layer for team members and holidays."""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from app.core.exceptions import ReferentialIntegrityError
from app.core.storage import storage_errors
from app.models.holiday import Holiday
from app.models.team_member import TeamMember

logger = logging.getLogger(__name__)


class HolidayRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    # -- Team members ---------------------------------------------------------

    async def list_team_members(self) -> list[TeamMember]:
        with storage_errors("list_team_members"):
            result = await self._db.execute(select(TeamMember).order_by(TeamMember.id))
            return list(result.scalars().all())

    async def get_team_member(self, member_id: int) -> TeamMember | None:
        with storage_errors("get_team_member"):
            result = await self._db.execute(
                select(TeamMember).where(TeamMember.id == member_id)
            )
            return result.scalar_one_or_none()

    async def insert_team_member(self, name: str) -> TeamMember:
        member = TeamMember(name=name)
        with storage_errors("insert_team_member"):
            self._db.add(member)
            await self._db.flush()
            await self._db.refresh(member)
        return member

    # -- Holidays -------------------------------------------------------------

    def _holidays_with_member(self):
        return (
            select(Holiday)
            .join(Holiday.team_member)
            .options(contains_eager(Holiday.team_member))
            .order_by(Holiday.holiday_date, Holiday.id)
            .execution_options(populate_existing=True)
        )

    async def list_holidays_in_range(self, start: date, end: date) -> list[Holiday]:
        """Holidays with their member, ``start <= holiday_date <= end``."""
        query = self._holidays_with_member().where(
            Holiday.holiday_date >= start,
            Holiday.holiday_date <= end,
        )
        with storage_errors("list_holidays_in_range"):
            result = await self._db.execute(query)
            return list(result.scalars().all())

    async def list_holidays(
        self,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Holiday]:
        query = self._holidays_with_member()
        if date_from is not None:
            query = query.where(Holiday.holiday_date >= date_from)
        if date_to is not None:
            query = query.where(Holiday.holiday_date <= date_to)
        with storage_errors("list_holidays"):
            result = await self._db.execute(query)
            return list(result.scalars().all())

    async def insert_holiday(self, member_id: int, holiday_date: date) -> Holiday:
        """Insert a holiday; the foreign key on ``team_member_id`` is authoritative."""
        holiday = Holiday(team_member_id=member_id, holiday_date=holiday_date)
        with storage_errors("insert_holiday"):
            self._db.add(holiday)
            try:
                await self._db.flush()
            except IntegrityError as exc:
                logger.warning(
                    "Holiday insert rejected by foreign key team_member_id=%s", member_id
                )
                raise ReferentialIntegrityError(member_id) from exc
            await self._db.refresh(holiday)
        return holiday

    # -- Health ---------------------------------------------------------------

    async def ping(self) -> None:
        with storage_errors("ping"):
            await self._db.execute(select(1))
