"""
Feedback Tracker Backend — BloodPressure SQLAlchemy Model
==========================================================

What:  ORM model representing the `blood_pressures` table.
How:   One row per reading: calendar date, systolic and diastolic pressure,
       and the owning user.

Query Patterns:
    - Page of readings:     ORDER BY id (or the requested sort) LIMIT/OFFSET
    - Newest first:         ORDER BY date DESC → idx_blood_pressures_date
    - Readings of one user: WHERE user_id = :id → idx_blood_pressures_user_id
"""

import datetime
from typing import Optional

from sqlalchemy import Date, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from feedback.database import Base, Identifier, IdentityEqualityMixin
from feedback.models.user import User


class BloodPressure(IdentityEqualityMixin, Base):
    """A single blood pressure reading."""

    __tablename__ = "blood_pressures"

    id: Mapped[int] = mapped_column(Identifier, primary_key=True, autoincrement=True)

    date: Mapped[Optional[datetime.date]] = mapped_column(Date, nullable=True)

    systolic: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    diastolic: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # ── Owner ─────────────────────────────────────────────────────────────
    # The FK column is the source of truth; mappers only ever write user_id.
    # The relationship is read-only and joined so that user.login is
    # available when building the DTO. Every reading has exactly one owner.
    user_id: Mapped[int] = mapped_column(
        Identifier, ForeignKey("users.id"), nullable=False
    )
    user: Mapped[Optional[User]] = relationship(lazy="joined", viewonly=True)

    __table_args__ = (
        Index("idx_blood_pressures_date", "date"),
        Index("idx_blood_pressures_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<BloodPressure(id={self.id}, date='{self.date}', "
            f"systolic={self.systolic}, diastolic={self.diastolic})>"
        )
