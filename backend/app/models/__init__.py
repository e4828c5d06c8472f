"""SQLAlchemy ORM models.

All models are imported here so that Alembic can discover them
via ``Base.metadata`` when generating migrations.
"""

from app.models.holiday import Holiday  # noqa: F401
from app.models.team_member import TeamMember  # noqa: F401

__all__ = [
    "Holiday",
    "TeamMember",
]
