"""
Feedback Tracker Backend — Entity ⇄ DTO Mapper
===============================================

What:  Pure, stateless translation between ORM entities and transfer objects.
Why:   Lets the table layout and the wire contract evolve independently.
How:   One generic mapper, configured with the entity class, the DTO class
       and the list of scalar fields both sides share. The owner relation is
       handled by convention:

           entity.user_id  ──to_dto──▶  dto.user_id
           entity.user.login ────────▶  dto.user_login
           dto.user_id  ──to_entity──▶  entity.user_id   (reference only)

Reference-only owners:
    to_entity() never builds or loads a User. It sets the foreign key and
    leaves the relationship unset, which is all an INSERT/UPDATE needs.
    The owner's login only shows up after the row is re-read with its
    joined relationship.
"""

from typing import Generic, Iterable, List, Optional, Sequence, Type, TypeVar

from feedback.database import Base
from feedback.models.user import User
from feedback.schemas.base import EntityDTO

E = TypeVar("E", bound=Base)
D = TypeVar("D", bound=EntityDTO)


class EntityMapper(Generic[E, D]):
    """
    Bidirectional mapper for one entity type.

    Args:
        entity_class: SQLAlchemy model class
        dto_class:    Pydantic DTO class
        fields:       Scalar attribute names copied verbatim in both directions
                      (id and the owner are handled separately)
        owner_field:  Entity column holding the owner's user id
    """

    def __init__(
        self,
        entity_class: Type[E],
        dto_class: Type[D],
        fields: Sequence[str],
        owner_field: str = "user_id",
    ):
        self.entity_class = entity_class
        self.dto_class = dto_class
        self.fields = tuple(fields)
        self.owner_field = owner_field

    def to_dto(self, entity: Optional[E]) -> Optional[D]:
        if entity is None:
            return None
        values = {name: getattr(entity, name) for name in self.fields}
        # `user` is a joined relationship; read it from __dict__ so a
        # transient or not-yet-reloaded entity never triggers a lazy load
        owner = entity.__dict__.get("user")
        # Unvalidated: stubs and owner-less rows must still map, even where
        # the DTO requires an owner on input
        return self.dto_class.model_construct(
            id=entity.id,
            user_id=getattr(entity, self.owner_field),
            user_login=owner.login if owner is not None else None,
            **values,
        )

    def to_entity(self, dto: Optional[D]) -> Optional[E]:
        if dto is None:
            return None
        values = {name: getattr(dto, name) for name in self.fields}
        values[self.owner_field] = dto.user_id
        return self.entity_class(id=dto.id, **values)

    def to_dtos(self, entities: Iterable[E]) -> List[D]:
        return [self.to_dto(entity) for entity in entities]

    def to_entities(self, dtos: Iterable[D]) -> List[E]:
        return [self.to_entity(dto) for dto in dtos]

    def from_id(self, id: Optional[int]) -> Optional[E]:
        """Reference-only stub carrying just the id; None for a None id."""
        if id is None:
            return None
        return self.entity_class(id=id)

    def copy_onto(self, source: E, target: E) -> E:
        """Overwrite target's scalar fields and owner with source's."""
        for name in self.fields:
            setattr(target, name, getattr(source, name))
        setattr(target, self.owner_field, getattr(source, self.owner_field))
        return target


class UserMapper:
    """Reduces users to identifiers and back."""

    @staticmethod
    def user_from_id(id: Optional[int]) -> Optional[User]:
        if id is None:
            return None
        return User(id=id)
