import logging

from fastapi import APIRouter, Depends, HTTPException

from app.core.security import get_current_user
from app.services.dashboard_service import get_dashboard_overview, get_wetland_map

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Dashboard"])


@router.get("/", dependencies=[Depends(get_current_user)])
async def dashboard_overview():
    """Wetland health counts, 24h averages and recent critical alerts."""
    try:
        return get_dashboard_overview()
    except Exception:
        logger.exception("Error building dashboard overview")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/map", dependencies=[Depends(get_current_user)])
async def wetland_map():
    try:
        markers = get_wetland_map()
        return {"success": True, "total": len(markers), "wetlands": markers}
    except Exception:
        logger.exception("Error building wetland map")
        raise HTTPException(status_code=500, detail="Internal server error")
