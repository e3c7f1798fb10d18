"""Persistence access layer."""

from feedback.repositories.base import CrudRepository, QueryScope
from feedback.repositories.user_repository import UserRepository, user_repository

__all__ = ["CrudRepository", "QueryScope", "UserRepository", "user_repository"]
