import logging
import pytz
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from app.core.config import settings
from app.jobs.simulate_readings import run_simulation_tick

logger = logging.getLogger(__name__)

class SchedulerService:
    """
    Manages background job scheduling using APScheduler.
    Appends simulated sensor readings on a fixed interval. Jobs run on the
    application event loop, the same thread that serves requests.
    """

    def __init__(self, timezone: str = None, interval_seconds: int = None):
        timezone = timezone or settings.TIMEZONE
        self.timezone = pytz.timezone(timezone)
        self.interval_seconds = interval_seconds or settings.SIMULATION_INTERVAL_SECONDS
        self.scheduler = AsyncIOScheduler(
            timezone=self.timezone,
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": self.interval_seconds,
            },
        )
        logger.info("SchedulerService initialized with timezone: %s", timezone)

    def start(self):
        """Register the recurring jobs and start the scheduler (needs a running event loop)."""
        self._add_recurring_jobs()
        self.scheduler.start()
        logger.info("Scheduler started successfully.")
        return self.scheduler

    def _add_recurring_jobs(self):
        self.scheduler.add_job(
            run_simulation_tick,
            trigger=IntervalTrigger(seconds=self.interval_seconds, timezone=self.timezone),
            id="simulate_readings",
            replace_existing=True,
        )
        logger.info("Jobs configured: sensor simulation every %ss.", self.interval_seconds)

    def stop(self):
        """Gracefully stop the scheduler."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Scheduler stopped cleanly.")


def start_scheduler():
    """Entry point for external use (e.g., from FastAPI lifespan)."""
    if not settings.SCHEDULER_ENABLED:
        logger.info("Scheduler disabled by configuration.")
        return None
    service = SchedulerService()
    service.start()
    return service
