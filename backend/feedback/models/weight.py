"""
Feedback Tracker Backend — Weight SQLAlchemy Model
===================================================

What:  ORM model representing the `weights` table (one row per weigh-in).
"""

import datetime
from typing import Optional

from sqlalchemy import Date, Float, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from feedback.database import Base, Identifier, IdentityEqualityMixin
from feedback.models.user import User


class Weight(IdentityEqualityMixin, Base):
    __tablename__ = "weights"

    id: Mapped[int] = mapped_column(Identifier, primary_key=True, autoincrement=True)

    date: Mapped[Optional[datetime.date]] = mapped_column(Date, nullable=True)

    # Double precision; unit is whatever the user's preferences say
    weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    user_id: Mapped[Optional[int]] = mapped_column(
        Identifier, ForeignKey("users.id"), nullable=True
    )
    user: Mapped[Optional[User]] = relationship(lazy="joined", viewonly=True)

    __table_args__ = (
        Index("idx_weights_date", "date"),
        Index("idx_weights_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Weight(id={self.id}, date='{self.date}', weight={self.weight})>"
