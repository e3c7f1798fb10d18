"""
Feedback Tracker Backend — Points SQLAlchemy Model
===================================================

What:  ORM model representing the `points` table.
How:   One row per scored day: calendar date, point value, owning user.

Query Patterns:
    - Admin listing:     ORDER BY date DESC → idx_points_date
    - Personal listing:  WHERE user_id = :caller → idx_points_user_id
"""

import datetime
from typing import Optional

from sqlalchemy import Date, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from feedback.database import Base, Identifier, IdentityEqualityMixin
from feedback.models.user import User


class Points(IdentityEqualityMixin, Base):
    """Points scored by a user on a given day."""

    __tablename__ = "points"

    id: Mapped[int] = mapped_column(Identifier, primary_key=True, autoincrement=True)

    date: Mapped[Optional[datetime.date]] = mapped_column(Date, nullable=True)

    points: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    user_id: Mapped[Optional[int]] = mapped_column(
        Identifier, ForeignKey("users.id"), nullable=True
    )
    user: Mapped[Optional[User]] = relationship(lazy="joined", viewonly=True)

    __table_args__ = (
        Index("idx_points_date", "date"),
        Index("idx_points_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Points(id={self.id}, date='{self.date}', points={self.points})>"
