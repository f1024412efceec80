# app/services/readings_service.py
import logging
import random
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import SessionLocal
from app.models.sensor_reading import SensorReading
from app.models.wetland import Wetland
from app.utils.sensor_utils import (
    MONITORED_TYPES,
    SENSOR_TYPES,
    classify_reading,
    label_for,
    synthetic_value,
    unit_for,
)
from app.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

LATEST_LIMIT = 20
CHART_POINTS = 24

# Sensor types appended on every simulation tick
TICK_TYPES = ("temperature", "ph")


def build_reading(wetland_id: int, sensor_type: str, value: float, timestamp: datetime) -> SensorReading:
    """Create a reading with unit and status derived at creation time."""
    return SensorReading(
        wetland_id=wetland_id,
        sensor_type=sensor_type,
        value=value,
        unit=unit_for(sensor_type),
        timestamp=timestamp,
        status=classify_reading(sensor_type, value),
    )


def generate_history(
    wetland_ids: Iterable[int],
    days: int = None,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> List[SensorReading]:
    """One reading per monitored type per day, going back `days` days."""
    days = settings.HISTORY_DAYS if days is None else days
    now = now or utcnow()
    readings = []

    for wetland_id in wetland_ids:
        for i in range(days):
            timestamp = now - timedelta(days=i)
            for sensor_type in MONITORED_TYPES:
                value = synthetic_value(sensor_type, rng)
                readings.append(build_reading(wetland_id, sensor_type, value, timestamp))

    return readings


def truncate_readings(db: Session, limit: int = None) -> int:
    """Keep only the `limit` most recent readings; returns how many were removed."""
    limit = settings.MAX_SENSOR_READINGS if limit is None else limit

    keep_ids = (
        select(SensorReading.id)
        .order_by(SensorReading.timestamp.desc(), SensorReading.id.desc())
        .limit(limit)
    )
    removed = (
        db.query(SensorReading)
        .filter(SensorReading.id.not_in(keep_ids))
        .delete(synchronize_session=False)
    )
    return removed


def simulate_tick(db: Session, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> int:
    """
    Append one temperature and one pH reading per wetland, then truncate
    the store to the most recent readings. Returns the number added.
    """
    now = now or utcnow()
    wetland_ids = [row[0] for row in db.query(Wetland.id).all()]

    new_readings = [
        build_reading(wetland_id, sensor_type, synthetic_value(sensor_type, rng), now)
        for wetland_id in wetland_ids
        for sensor_type in TICK_TYPES
    ]
    db.add_all(new_readings)
    db.flush()

    removed = truncate_readings(db)
    db.commit()

    logger.debug(f"Simulation tick: +{len(new_readings)} readings, -{removed} truncated")
    return len(new_readings)


def _ensure_wetland(db: Session, wetland_id: int) -> Wetland:
    wetland = db.get(Wetland, wetland_id)
    if not wetland:
        raise ValueError(f"Wetland {wetland_id} not found")
    return wetland


def get_latest_readings(wetland_id: int, limit: int = LATEST_LIMIT) -> List[SensorReading]:
    """Most recent readings for a wetland, newest first."""
    db = SessionLocal()
    try:
        _ensure_wetland(db, wetland_id)
        return (
            db.query(SensorReading)
            .filter(SensorReading.wetland_id == wetland_id)
            .order_by(SensorReading.timestamp.desc(), SensorReading.id.desc())
            .limit(limit)
            .all()
        )
    finally:
        db.close()


def get_chart_series(wetland_id: int, sensor_type: str = "temperature", points: int = CHART_POINTS):
    """
    Chart data for one wetland and sensor type: the last `points` readings
    in chronological order, values rounded to 2 decimals.
    """
    if sensor_type not in SENSOR_TYPES:
        raise ValueError(f"Unknown sensor type: {sensor_type}")

    db = SessionLocal()
    try:
        wetland = _ensure_wetland(db, wetland_id)
        rows = (
            db.query(SensorReading)
            .filter(
                SensorReading.wetland_id == wetland_id,
                SensorReading.sensor_type == sensor_type,
            )
            .order_by(SensorReading.timestamp.desc(), SensorReading.id.desc())
            .limit(points)
            .all()
        )

        series = [
            {
                "timestamp": r.timestamp,
                "value": round(r.value, 2),
                "status": r.status,
                "unit": r.unit,
            }
            for r in reversed(rows)
        ]

        return {
            "wetland_id": wetland.id,
            "wetland_name": wetland.name,
            "wetland_status": wetland.status,
            "sensor_type": sensor_type,
            "label": label_for(sensor_type),
            "points": series,
        }
    finally:
        db.close()
