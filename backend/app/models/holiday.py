from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Holiday(Base):
    """One day of absence for one team member.

    Several rows may share the same (team_member_id, holiday_date) pair;
    readers collapse them.
    """

    __tablename__ = "holidays"
    __table_args__ = (
        Index("ix_holidays_holiday_date", "holiday_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    team_member_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("team_members.id"), nullable=False
    )
    holiday_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    team_member: Mapped["TeamMember"] = relationship(back_populates="holidays")  # noqa: F821

    def __repr__(self) -> str:
        return (
            f"<Holiday(id={self.id}, team_member_id={self.team_member_id}, "
            f"holiday_date={self.holiday_date})>"
        )
