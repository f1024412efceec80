# app/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging
from app.services.scheduler_service import start_scheduler
from app.api import routes_admin, routes_auth, routes_dashboard, routes_reports, routes_wetlands
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.seed_data import init_db
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown events."""
    setup_logging()
    logger.info("Starting application...")

    init_db()
    logger.info("Mock data loaded.")

    scheduler = start_scheduler()
    if scheduler:
        logger.info("Scheduler started.")

    yield

    if scheduler:
        scheduler.stop()
        logger.info("Scheduler stopped.")
    logger.info("Application shutdown complete.")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description="Ka-Eco Wetland Monitoring API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    same_site="lax",
)

app.include_router(routes_auth.router)
app.include_router(routes_wetlands.router)
app.include_router(routes_dashboard.router)
app.include_router(routes_reports.router)
app.include_router(routes_admin.router)

@app.get("/", tags=["Health"])
def health_check():
    """Basic health endpoint for uptime monitoring."""
    return {
        "status": "ok",
        "project": settings.PROJECT_NAME,
        "version": settings.PROJECT_VERSION,
    }
