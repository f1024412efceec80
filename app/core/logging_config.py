# app/core/logging_config.py
import logging
import sys

from app.core.config import settings


def setup_logging(level: str = None):
    """
    Configures global logging for the entire application.
    Logs to stdout (container-friendly) and includes timestamps.
    """
    level = level or settings.LOG_LEVEL
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("apscheduler").setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Global logging configured (level=%s).", level.upper())
