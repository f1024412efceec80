import json
import logging
from datetime import datetime
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.sensor_reading import SensorReading
from app.models.user import User
from app.models.wetland import Wetland
from app.core.security import hash_password
from app.services.readings_service import generate_history

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _load_json(name: str) -> dict:
    json_path = DATA_DIR / name
    if not json_path.exists():
        logger.warning(f"Seed file not found: {json_path}")
        return {}
    with open(json_path, "r", encoding="utf-8") as f:
        return json.load(f)


def seed_users_from_json(db) -> int:
    if db.query(User).count() > 0:
        logger.info("Users already seeded, skipping.")
        return 0

    users = _load_json("users.json").get("users", [])
    for info in users:
        last_login = info.get("last_login")
        db.add(User(
            email=info["email"].lower(),
            name=info["name"],
            role=info["role"],
            organization=info.get("organization"),
            password_hash=hash_password(info["password"]),
            status=info.get("status", "active"),
            last_login=datetime.fromisoformat(last_login) if last_login else None,
        ))
    db.commit()
    logger.info(f"Seeded {len(users)} users")
    return len(users)


def seed_wetlands_from_json(db) -> int:
    if db.query(Wetland).count() > 0:
        logger.info("Wetlands already seeded, skipping.")
        return 0

    wetlands = _load_json("wetlands.json").get("wetlands", [])
    for info in wetlands:
        db.add(Wetland(
            name=info["name"],
            latitude=info.get("lat", 0.0),
            longitude=info.get("lng", 0.0),
            area=info["area"],
            type=info["type"],
            status=info["status"],
            description=info["description"],
            sensors=info.get("sensors", []),
            last_updated=datetime.fromisoformat(info["last_updated"]),
        ))
    db.commit()
    logger.info(f"Seeded {len(wetlands)} wetlands")
    return len(wetlands)


def seed_sensor_history(db) -> int:
    if db.query(SensorReading).count() > 0:
        logger.info("Sensor readings already seeded, skipping.")
        return 0

    wetland_ids = [row[0] for row in db.query(Wetland.id).order_by(Wetland.id).all()]
    readings = generate_history(wetland_ids)
    db.add_all(readings)
    db.commit()
    logger.info(f"Seeded {len(readings)} historical sensor readings")
    return len(readings)


def init_db():
    """Create tables and load the mock data set."""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_users_from_json(db)
        seed_wetlands_from_json(db)
        seed_sensor_history(db)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Seeding failed: %s", e)
        raise
    finally:
        db.close()


def reset_db():
    """Drop everything and start again from the seed data."""
    Base.metadata.drop_all(bind=engine)
    init_db()
