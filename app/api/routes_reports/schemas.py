from datetime import datetime
from typing import Dict, List, Literal

from pydantic import BaseModel

from app.schemas.reading_schema import ChartPoint, SensorReadingOut
from app.schemas.wetland_schema import WetlandOut


class DateRange(BaseModel):
    start: datetime
    end: datetime


class ReportSummary(BaseModel):
    total_readings: int
    critical_alerts: int
    warning_alerts: int
    avg_temperature: float
    avg_ph: float


class WetlandReportOut(BaseModel):
    wetland: WetlandOut
    date_range: DateRange
    readings: List[SensorReadingOut]
    summary: ReportSummary
    status_distribution: Dict[str, int]
    health_trend: Literal["Improving", "Stable", "Declining"]
    temperature_series: List[ChartPoint]
    ph_series: List[ChartPoint]
    generated_at: datetime
