import logging
from datetime import datetime
from typing import List

from app.db.session import SessionLocal
from app.models.sensor_reading import SensorReading
from app.models.wetland import Wetland
from app.schemas.reading_schema import SensorReadingOut
from app.schemas.wetland_schema import WetlandOut
from app.utils.time_utils import to_naive_utc, utcnow

logger = logging.getLogger(__name__)

SERIES_POINTS = 20


def average_of(readings: List[SensorReading], sensor_type: str) -> float:
    """Mean value of one sensor type; 0 when there is nothing to average."""
    values = [r.value for r in readings if r.sensor_type == sensor_type]
    if not values:
        return 0.0
    return sum(values) / len(values)


def calculate_health_trend(critical_alerts: int, warning_alerts: int) -> str:
    """Classifies the wetland trend from alert counts"""
    if critical_alerts > warning_alerts:
        return "Declining"
    elif critical_alerts == 0 and warning_alerts < 5:
        return "Improving"
    return "Stable"


def _series(readings: List[SensorReading], sensor_type: str, points: int = SERIES_POINTS):
    selected = [r for r in readings if r.sensor_type == sensor_type][-points:]
    return [
        {
            "timestamp": r.timestamp,
            "value": round(r.value, 2),
            "status": r.status,
            "unit": r.unit,
        }
        for r in selected
    ]


def generate_report(wetland_id: int, start: datetime, end: datetime):
    """
    Builds a report for one wetland over [start, end] (inclusive).

    Includes the matching readings in chronological order, alert counts,
    temperature/pH averages, the status distribution, a health trend and
    the last temperature/pH points for charting.
    """
    start = to_naive_utc(start)
    end = to_naive_utc(end)
    if start > end:
        raise ValueError("Report start must not be after end")

    db = SessionLocal()
    try:
        wetland = db.get(Wetland, wetland_id)
        if not wetland:
            raise LookupError(f"Wetland {wetland_id} not found")

        readings = (
            db.query(SensorReading)
            .filter(
                SensorReading.wetland_id == wetland_id,
                SensorReading.timestamp >= start,
                SensorReading.timestamp <= end,
            )
            .order_by(SensorReading.timestamp.asc(), SensorReading.id.asc())
            .all()
        )

        critical = sum(1 for r in readings if r.status == "critical")
        warning = sum(1 for r in readings if r.status == "warning")
        normal = sum(1 for r in readings if r.status == "normal")

        report = {
            "wetland": WetlandOut.from_model(wetland),
            "date_range": {"start": start, "end": end},
            "readings": [SensorReadingOut.model_validate(r) for r in readings],
            "summary": {
                "total_readings": len(readings),
                "critical_alerts": critical,
                "warning_alerts": warning,
                "avg_temperature": round(average_of(readings, "temperature"), 2),
                "avg_ph": round(average_of(readings, "ph"), 2),
            },
            "status_distribution": {
                "normal": normal,
                "warning": warning,
                "critical": critical,
            },
            "health_trend": calculate_health_trend(critical, warning),
            "temperature_series": _series(readings, "temperature"),
            "ph_series": _series(readings, "ph"),
            "generated_at": utcnow(),
        }

        logger.info(f"Generated report for wetland {wetland_id}: {len(readings)} readings")
        return report

    finally:
        db.close()
