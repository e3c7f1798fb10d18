"""Entity ⇄ DTO mappers."""

from feedback.mappers.base import EntityMapper, UserMapper

__all__ = ["EntityMapper", "UserMapper"]
