# app/services/stats_service.py
import logging
from datetime import timedelta

import pandas as pd

from app.db.session import SessionLocal
from app.models.sensor_reading import SensorReading
from app.models.wetland import Wetland
from app.services.users_service import count_users
from app.utils.sensor_utils import MONITORED_TYPES
from app.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

TREND_DAYS = 7


def daily_breakdown(readings_df: pd.DataFrame, days: int = TREND_DAYS, now=None) -> list:
    """
    Per-day reading counts (total and by status) for the last `days`
    calendar days, oldest first. Days without data are reported as zeros.
    """
    now = now or utcnow()
    today = pd.Timestamp(now).normalize()
    day_index = pd.date_range(end=today, periods=days, freq="D")

    if readings_df.empty:
        counts = pd.DataFrame(0, index=day_index, columns=["critical", "warning", "normal"])
    else:
        df = readings_df.assign(day=pd.to_datetime(readings_df["timestamp"]).dt.normalize())
        counts = (
            pd.crosstab(df["day"], df["status"])
            .reindex(index=day_index, columns=["critical", "warning", "normal"], fill_value=0)
            .fillna(0)
            .astype(int)
        )

    return [
        {
            "date": day.strftime("%Y-%m-%d"),
            "readings": int(row.sum()),
            "critical": int(row["critical"]),
            "warning": int(row["warning"]),
            "normal": int(row["normal"]),
        }
        for day, row in counts.iterrows()
    ]


def get_system_stats():
    """System statistics for the admin panel."""
    db = SessionLocal()
    try:
        wetlands = db.query(Wetland).all()
        rows = db.query(
            SensorReading.timestamp,
            SensorReading.status,
            SensorReading.sensor_type,
        ).all()
    finally:
        db.close()

    df = pd.DataFrame(rows, columns=["timestamp", "status", "sensor_type"])
    now = utcnow()

    if df.empty:
        recent_7d = today_24h = 0
        status_counts = {}
        type_counts = {}
    else:
        ts = pd.to_datetime(df["timestamp"])
        recent_7d = int((ts >= now - timedelta(days=7)).sum())
        today_24h = int((ts >= now - timedelta(hours=24)).sum())
        status_counts = df["status"].value_counts().to_dict()
        type_counts = df["sensor_type"].value_counts().to_dict()

    total_users, active_users = count_users()

    status_distribution = {
        status: sum(1 for w in wetlands if w.status == status)
        for status in ("healthy", "degraded", "critical")
    }

    stats = {
        "wetlands": {
            "total": len(wetlands),
            **status_distribution,
        },
        "total_sensors": sum(len(w.sensors or []) for w in wetlands),
        "readings": {
            "total": int(len(df)),
            "last_7_days": recent_7d,
            "last_24_hours": today_24h,
        },
        "alerts": {
            "critical": int(status_counts.get("critical", 0)),
            "warning": int(status_counts.get("warning", 0)),
        },
        "users": {
            "total": total_users,
            "active": active_users,
        },
        "daily_readings": daily_breakdown(df, now=now),
        "wetland_status_distribution": status_distribution,
        "sensor_type_distribution": {
            sensor_type: int(type_counts.get(sensor_type, 0)) for sensor_type in MONITORED_TYPES
        },
    }

    logger.info(f"System stats computed over {len(df)} readings")
    return stats
