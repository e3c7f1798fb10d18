"""
ORM models. Importing this package registers every table with Base.metadata
(Alembic autogenerate and the test suite's create_all rely on that).
"""

from feedback.models.user import User
from feedback.models.blood_pressure import BloodPressure
from feedback.models.points import Points
from feedback.models.weight import Weight

__all__ = ["User", "BloodPressure", "Points", "Weight"]
