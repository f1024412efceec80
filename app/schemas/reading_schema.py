from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

SensorType = Literal["water_quality", "vegetation", "pollution", "temperature", "ph", "dissolved_oxygen"]
ReadingStatus = Literal["normal", "warning", "critical"]


class SensorReadingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    wetland_id: int
    sensor_type: SensorType
    value: float
    unit: str
    timestamp: datetime
    status: ReadingStatus


class ChartPoint(BaseModel):
    timestamp: datetime
    value: float
    status: ReadingStatus
    unit: str
