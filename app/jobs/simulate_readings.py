"""
Sensor Simulation Job
---------------------
Appends synthetic readings for every wetland and keeps the reading store
bounded. Runs on a fixed interval (30 s by default) from the scheduler.
"""

import logging
from typing import Optional

from app.core.config import settings
from app.db.session import SessionLocal
from app.models.sensor_reading import SensorReading
from app.models.wetland import Wetland
from app.services.readings_service import simulate_tick


# -------------------------------------------------------------------------
# Logging Wrapper
# -------------------------------------------------------------------------
class SimulationJobLogger:
    """Thin wrapper around global logging for structured messages."""
    _instance = None

    def __new__(cls, name: str = "app.jobs.simulate_readings"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.logger = logging.getLogger(name)
        return cls._instance

    def section_header(self, title: str):
        sep = "=" * 60
        self.logger.debug(f"\n{sep}\n{title}\n{sep}")

    def info(self, msg: str):
        self.logger.info(msg)

    def error(self, msg: str, exc: Optional[Exception] = None):
        self.logger.error(msg)
        if exc:
            self.logger.exception(exc)


# -------------------------------------------------------------------------
# Job Entrypoint
# -------------------------------------------------------------------------
def simulate_readings_job() -> int:
    """Main job executed by the scheduler. Returns the number of readings added."""
    logger = SimulationJobLogger()
    logger.section_header("Sensor simulation tick")

    db = SessionLocal()
    try:
        added = simulate_tick(db)
        logger.info(f"Simulation tick added {added} readings (cap {settings.MAX_SENSOR_READINGS})")
        return added
    except Exception as e:
        db.rollback()
        logger.error("Error in simulate_readings_job", e)
        return 0
    finally:
        db.close()


async def run_simulation_tick() -> int:
    """Scheduler entrypoint. Runs on the event loop, not in a worker thread."""
    return simulate_readings_job()


def log_store_summary():
    """Log a database summary after a job run."""
    logger = SimulationJobLogger()
    db = SessionLocal()

    try:
        total_readings = db.query(SensorReading).count()
        total_wetlands = db.query(Wetland).count()
        last_reading = db.query(SensorReading).order_by(SensorReading.timestamp.desc()).first()

        logger.info(f"Total Wetlands: {total_wetlands}")
        logger.info(f"Total Readings: {total_readings}")
        logger.info(f"Last timestamp: {getattr(last_reading, 'timestamp', None)}")

    finally:
        db.close()


if __name__ == "__main__":
    from app.core.logging_config import setup_logging
    from app.db.seed_data import init_db

    setup_logging()
    init_db()
    simulate_readings_job()
    log_store_summary()
