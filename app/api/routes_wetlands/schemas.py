from typing import List

from pydantic import BaseModel

from app.schemas.reading_schema import ChartPoint, SensorReadingOut
from app.schemas.wetland_schema import WetlandOut, WetlandStatus


class WetlandListOut(BaseModel):
    success: bool = True
    total: int
    wetlands: List[WetlandOut]


class LatestReadingsOut(BaseModel):
    success: bool = True
    wetland_id: int
    total: int
    readings: List[SensorReadingOut]


class ChartOut(BaseModel):
    wetland_id: int
    wetland_name: str
    wetland_status: WetlandStatus
    sensor_type: str
    label: str
    points: List[ChartPoint]
