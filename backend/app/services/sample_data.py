"""Sample Data.

Seeds a small demo team with a few holidays in the current week so a
fresh installation has something to show.
"""

import logging
from datetime import date, timedelta

from app.repositories.holiday_repository import HolidayRepository
from app.services.week_window import current_week

logger = logging.getLogger(__name__)

SAMPLE_TEAM = ("Alice Johnson", "Bob Smith", "Carol Davis", "David Wilson")

# (index into SAMPLE_TEAM, days after Monday)
SAMPLE_HOLIDAYS = (
    (0, 0),
    (0, 1),
    (1, 2),
    (2, 2),
    (3, 4),
)


async def seed_sample_data(repo: HolidayRepository, today: date | None = None) -> int:
    """Insert the demo team and its holidays unless members already exist.

    Returns:
        Number of holidays created (0 when the team was not empty).
    """
    if await repo.list_team_members():
        logger.info("Sample data skipped: team members already present")
        return 0

    members = [await repo.insert_team_member(name) for name in SAMPLE_TEAM]
    monday = current_week(today).start_date

    for member_index, offset in SAMPLE_HOLIDAYS:
        await repo.insert_holiday(members[member_index].id, monday + timedelta(days=offset))

    logger.info(
        "Sample data seeded: %d team members, %d holidays",
        len(members), len(SAMPLE_HOLIDAYS),
    )
    return len(SAMPLE_HOLIDAYS)
