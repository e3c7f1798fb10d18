"""
Feedback Tracker Backend — Transfer Object Base
================================================

What:  Common base for every entity DTO exchanged over the wire.
Why:   Keeps the wire contract (camelCase JSON, owner flattened to
       userId/userLogin) independent of the table layout.
How:   Pydantic alias generator maps snake_case attributes to camelCase
       field names; both spellings are accepted on input, camelCase is
       emitted on output (FastAPI serializes response models by alias).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from feedback.database import MAX_IDENTIFIER


class EntityDTO(BaseModel):
    """
    Shared fields and identity semantics of all DTOs.

    Equality follows the entities: two DTOs of the same type are equal only
    when both have the same non-null id.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: Optional[int] = Field(
        default=None, le=MAX_IDENTIFIER, description="Server-assigned identifier"
    )
    user_id: Optional[int] = Field(default=None, le=MAX_IDENTIFIER, description="Owner's user id")
    user_login: Optional[str] = Field(
        default=None,
        description="Owner's login (output only; ignored on input)",
    )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
