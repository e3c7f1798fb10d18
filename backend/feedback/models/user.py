"""
Feedback Tracker Backend — User SQLAlchemy Model
=================================================

What:  ORM model for the `users` table.
Why:   Every measurement row points at its owner through users.id.
Who:   Read by UserRepository (caller resolution) and joined by the
       measurement models to surface the owner's login on DTOs.

Account management (registration, passwords, activation e-mails) lives in
the authentication service; this table only needs enough to identify an owner.
"""

from typing import Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from feedback.database import Base, Identifier, IdentityEqualityMixin


class User(IdentityEqualityMixin, Base):
    """An account that owns measurements."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Identifier, primary_key=True, autoincrement=True)

    login: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    email: Mapped[Optional[str]] = mapped_column(String(254), nullable=True)

    activated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, login='{self.login}')>"
