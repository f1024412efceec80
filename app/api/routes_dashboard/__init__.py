from fastapi import APIRouter
from app.api.routes_dashboard.dashboard_routes import router as dashboard_routes

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])
router.include_router(dashboard_routes)
