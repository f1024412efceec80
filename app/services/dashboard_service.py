# app/services/dashboard_service.py
import logging
from datetime import timedelta

from app.db.session import SessionLocal
from app.models.sensor_reading import SensorReading
from app.models.wetland import Wetland
from app.services.report_service import average_of
from app.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

RECENT_ALERTS_LIMIT = 5


def get_dashboard_overview():
    """
    Key metrics for the dashboard: wetland health counts, 24h sensor
    averages across all sites and the most recent critical readings.
    """
    db = SessionLocal()
    try:
        wetlands = db.query(Wetland).all()
        names = {w.id: w.name for w in wetlands}

        since = utcnow() - timedelta(hours=24)
        recent = db.query(SensorReading).filter(SensorReading.timestamp >= since).all()

        critical_rows = (
            db.query(SensorReading)
            .filter(SensorReading.status == "critical")
            .order_by(SensorReading.timestamp.desc(), SensorReading.id.desc())
            .limit(RECENT_ALERTS_LIMIT)
            .all()
        )

        overview = {
            "wetlands": {
                "total": len(wetlands),
                "healthy": sum(1 for w in wetlands if w.status == "healthy"),
                "degraded": sum(1 for w in wetlands if w.status == "degraded"),
                "critical": sum(1 for w in wetlands if w.status == "critical"),
            },
            "averages_24h": {
                "temperature": round(average_of(recent, "temperature"), 2),
                "ph": round(average_of(recent, "ph"), 2),
                "water_quality": round(average_of(recent, "water_quality"), 2),
            },
            "recent_critical_alerts": [
                {
                    "id": r.id,
                    "wetland_id": r.wetland_id,
                    "wetland_name": names.get(r.wetland_id),
                    "sensor_type": r.sensor_type,
                    "value": round(r.value, 2),
                    "unit": r.unit,
                    "timestamp": r.timestamp,
                }
                for r in critical_rows
            ],
        }

        logger.info(f"Dashboard overview built for {len(wetlands)} wetlands")
        return overview
    finally:
        db.close()


def get_wetland_map():
    """Marker data for the wetland map."""
    db = SessionLocal()
    try:
        return [
            {
                "id": w.id,
                "name": w.name,
                "location": {"lat": w.latitude, "lng": w.longitude},
                "status": w.status,
                "type": w.type,
                "area": w.area,
            }
            for w in db.query(Wetland).order_by(Wetland.id).all()
        ]
    finally:
        db.close()
