"""Pydantic transfer objects (the API contract)."""

from feedback.schemas.base import EntityDTO
from feedback.schemas.blood_pressure import BloodPressureDTO
from feedback.schemas.points import PointsDTO
from feedback.schemas.weight import WeightDTO

__all__ = ["EntityDTO", "BloodPressureDTO", "PointsDTO", "WeightDTO"]
