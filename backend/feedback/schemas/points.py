"""Points transfer object."""

import datetime
from typing import Optional

from pydantic import Field

from feedback.schemas.base import EntityDTO


class PointsDTO(EntityDTO):
    date: Optional[datetime.date] = Field(default=None, description="Day the points were earned")
    points: Optional[int] = Field(default=None, description="Point value for the day")
