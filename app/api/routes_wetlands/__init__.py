from fastapi import APIRouter
from app.api.routes_wetlands.wetland_routes import router as wetland_routes

router = APIRouter(prefix="/wetlands", tags=["Wetlands"])
router.include_router(wetland_routes)
