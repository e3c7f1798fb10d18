"""BloodPressure transfer object."""

import datetime
from typing import Optional

from pydantic import Field

from feedback.database import MAX_IDENTIFIER
from feedback.schemas.base import EntityDTO


class BloodPressureDTO(EntityDTO):
    """
    A blood pressure reading as seen by clients.

    Every reading belongs to exactly one user, so userId is required in
    request bodies while it stays optional for the other measurements.
    The blood_pressures.user_id column is NOT NULL for the same reason.
    """

    date: Optional[datetime.date] = Field(default=None, description="Day of the reading")
    systolic: Optional[int] = Field(default=None, description="Systolic pressure (mmHg)")
    diastolic: Optional[int] = Field(default=None, description="Diastolic pressure (mmHg)")
    user_id: int = Field(le=MAX_IDENTIFIER, description="Owner's user id")
