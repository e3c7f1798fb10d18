"""
Feedback Tracker Backend — Services Layer
==========================================

What:  Orchestration layer sitting between routes (HTTP) and repositories.

Service Inventory:
    - EntityService:  generic save / find_all / find_one / delete
    - PointsService:  EntityService for Points + get_points_list()
    - UserService:    resolves the authenticated login to its user row

Module-level instances for blood pressure and weight are created here;
points_service and user_service live next to their classes.
"""

from feedback.descriptors import BLOOD_PRESSURE, WEIGHT
from feedback.schemas import BloodPressureDTO, WeightDTO
from feedback.services.entity_service import EntityService
from feedback.services.points_service import PointsService, points_service
from feedback.services.user_service import UserService, user_service

blood_pressure_service: EntityService[BloodPressureDTO] = EntityService(BLOOD_PRESSURE)
weight_service: EntityService[WeightDTO] = EntityService(WEIGHT)

__all__ = [
    "EntityService",
    "PointsService",
    "UserService",
    "blood_pressure_service",
    "points_service",
    "user_service",
    "weight_service",
]
