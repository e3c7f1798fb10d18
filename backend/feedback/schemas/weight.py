"""Weight transfer object."""

import datetime
from typing import Optional

from pydantic import Field

from feedback.schemas.base import EntityDTO


class WeightDTO(EntityDTO):
    date: Optional[datetime.date] = Field(default=None, description="Day of the weigh-in")
    weight: Optional[float] = Field(default=None, description="Measured weight")
