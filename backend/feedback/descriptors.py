"""
Feedback Tracker Backend — Entity Descriptors
==============================================

What:  One descriptor per tracked measurement, bundling everything the
       generic layers need to serve it.
Why:   The mapper, repository, service and resource are written once; a
       descriptor is what turns them into "the weights API" or "the points API".

Descriptor contents:
    entity_name   Name used in alert headers and log lines (camelCase)
    collection    URL segment under /api
    entity_class  SQLAlchemy model
    dto_class     Pydantic transfer object
    fields        Scalar fields copied by the mapper (id and owner excluded)
    mapper        EntityMapper built from the above (decode/encode)
    repository    CrudRepository for entity_class
"""

from dataclasses import dataclass, field
from typing import Tuple, Type

from feedback.database import Base
from feedback.mappers.base import EntityMapper
from feedback.models import BloodPressure, Points, Weight
from feedback.repositories.base import CrudRepository
from feedback.schemas import BloodPressureDTO, EntityDTO, PointsDTO, WeightDTO


@dataclass(frozen=True)
class EntityDescriptor:
    entity_name: str
    collection: str
    entity_class: Type[Base]
    dto_class: Type[EntityDTO]
    fields: Tuple[str, ...]
    owner_field: str = "user_id"
    mapper: EntityMapper = field(init=False, repr=False, compare=False)
    repository: CrudRepository = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # frozen dataclass: derived members are set once, here
        object.__setattr__(
            self, "mapper",
            EntityMapper(self.entity_class, self.dto_class, self.fields, self.owner_field),
        )
        object.__setattr__(self, "repository", CrudRepository(self.entity_class, self.owner_field))

    @property
    def resource_url(self) -> str:
        return f"/api/{self.collection}"


BLOOD_PRESSURE = EntityDescriptor(
    entity_name="bloodPressure",
    collection="blood-pressures",
    entity_class=BloodPressure,
    dto_class=BloodPressureDTO,
    fields=("date", "systolic", "diastolic"),
)

POINTS = EntityDescriptor(
    entity_name="points",
    collection="points",
    entity_class=Points,
    dto_class=PointsDTO,
    fields=("date", "points"),
)

WEIGHT = EntityDescriptor(
    entity_name="weight",
    collection="weights",
    entity_class=Weight,
    dto_class=WeightDTO,
    fields=("date", "weight"),
)
