# app/services/wetlands_service.py
import logging
from typing import List, Optional

from app.db.session import SessionLocal
from app.models.sensor_reading import SensorReading
from app.models.wetland import Wetland
from app.schemas.wetland_schema import WetlandCreate, WetlandOut, WetlandUpdate
from app.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


def list_wetlands(search: Optional[str] = None) -> List[WetlandOut]:
    """
    All wetlands, optionally filtered by a case-insensitive substring of
    name, type or status.
    """
    db = SessionLocal()
    try:
        wetlands = db.query(Wetland).order_by(Wetland.id).all()
        if search:
            term = search.strip().lower()
            wetlands = [
                w for w in wetlands
                if term in w.name.lower() or term in w.type.lower() or term in w.status.lower()
            ]
        return [WetlandOut.from_model(w) for w in wetlands]
    finally:
        db.close()


def get_wetland(wetland_id: int) -> WetlandOut:
    db = SessionLocal()
    try:
        wetland = db.get(Wetland, wetland_id)
        if not wetland:
            raise ValueError(f"Wetland {wetland_id} not found")
        return WetlandOut.from_model(wetland)
    finally:
        db.close()


def create_wetland(data: WetlandCreate) -> WetlandOut:
    db = SessionLocal()
    try:
        wetland = Wetland(
            name=data.name,
            description=data.description,
            area=data.area,
            type=data.type,
            status=data.status,
            latitude=data.location.lat,
            longitude=data.location.lng,
            sensors=data.sensors,
            last_updated=utcnow(),
        )
        db.add(wetland)
        db.commit()
        db.refresh(wetland)
        logger.info(f"Created wetland {wetland.id} ({wetland.name})")
        return WetlandOut.from_model(wetland)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def update_wetland(wetland_id: int, data: WetlandUpdate) -> WetlandOut:
    """Apply the fields present in the payload and refresh last_updated."""
    db = SessionLocal()
    try:
        wetland = db.get(Wetland, wetland_id)
        if not wetland:
            raise ValueError(f"Wetland {wetland_id} not found")

        updates = data.model_dump(exclude_unset=True)
        location = updates.pop("location", None)
        if location is not None:
            wetland.latitude = location["lat"]
            wetland.longitude = location["lng"]

        for field, value in updates.items():
            if value is None:
                continue
            setattr(wetland, field, value)

        wetland.last_updated = utcnow()
        db.commit()
        db.refresh(wetland)
        logger.info(f"Updated wetland {wetland_id}: {sorted(updates) + (['location'] if location else [])}")
        return WetlandOut.from_model(wetland)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def delete_wetland(wetland_id: int) -> int:
    """Remove a wetland and every reading attributed to it. Returns readings removed."""
    db = SessionLocal()
    try:
        wetland = db.get(Wetland, wetland_id)
        if not wetland:
            raise ValueError(f"Wetland {wetland_id} not found")

        removed = (
            db.query(SensorReading)
            .filter(SensorReading.wetland_id == wetland_id)
            .delete(synchronize_session="fetch")
        )
        db.delete(wetland)
        db.commit()
        logger.info(f"Deleted wetland {wetland_id} and {removed} readings")
        return removed
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
