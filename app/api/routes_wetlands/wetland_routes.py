import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.routes_wetlands.schemas import ChartOut, LatestReadingsOut, WetlandListOut
from app.core.config import settings
from app.core.security import get_current_user, require_editor
from app.schemas.reading_schema import SensorReadingOut, SensorType
from app.schemas.wetland_schema import WetlandCreate, WetlandOut, WetlandUpdate
from app.services.readings_service import get_chart_series, get_latest_readings
from app.services.wetlands_service import (
    create_wetland,
    delete_wetland,
    get_wetland,
    list_wetlands,
    update_wetland,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Wetlands"])


@router.get("/", response_model=WetlandListOut, dependencies=[Depends(get_current_user)])
async def get_all_wetlands(search: Optional[str] = Query(None, description="Match name, type or status")):
    """
    Retrieve all monitored wetlands, optionally filtered by a search term.
    """
    try:
        wetlands = list_wetlands(search)
        logger.info(f"Retrieved {len(wetlands)} wetlands")
        return {"success": True, "total": len(wetlands), "wetlands": wetlands}

    except Exception:
        logger.exception("Error retrieving wetlands")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/", response_model=WetlandOut, status_code=201, dependencies=[Depends(require_editor)])
async def add_wetland(data: WetlandCreate):
    """Create a wetland record (admin and researcher only)."""
    await asyncio.sleep(settings.SIMULATED_LATENCY_SECONDS)
    try:
        return create_wetland(data)
    except Exception:
        logger.exception("Error creating wetland")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{wetland_id}", response_model=WetlandOut, dependencies=[Depends(get_current_user)])
async def get_single_wetland(wetland_id: int):
    try:
        return get_wetland(wetland_id)

    except ValueError as e:
        logger.warning(f"Wetland {wetland_id} not found: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error retrieving wetland {wetland_id}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/{wetland_id}", response_model=WetlandOut, dependencies=[Depends(require_editor)])
async def edit_wetland(wetland_id: int, data: WetlandUpdate):
    """
    Update a wetland. Only the fields present in the body are changed;
    last_updated is refreshed.
    """
    await asyncio.sleep(settings.SIMULATED_LATENCY_SECONDS)
    try:
        return update_wetland(wetland_id, data)

    except ValueError as e:
        logger.warning(f"Wetland {wetland_id} not found: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error updating wetland {wetland_id}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{wetland_id}", dependencies=[Depends(require_editor)])
async def remove_wetland(wetland_id: int):
    """Delete a wetland together with all of its sensor readings."""
    try:
        removed = delete_wetland(wetland_id)
        return {"success": True, "wetland_id": wetland_id, "readings_removed": removed}

    except ValueError as e:
        logger.warning(f"Wetland {wetland_id} not found: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error deleting wetland {wetland_id}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{wetland_id}/readings/latest", response_model=LatestReadingsOut, dependencies=[Depends(get_current_user)])
async def get_wetland_latest_readings(wetland_id: int):
    """The 20 most recent readings of a wetland, newest first."""
    try:
        readings = get_latest_readings(wetland_id)
        return {
            "success": True,
            "wetland_id": wetland_id,
            "total": len(readings),
            "readings": [SensorReadingOut.model_validate(r) for r in readings],
        }

    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error retrieving readings for wetland {wetland_id}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{wetland_id}/chart", response_model=ChartOut, dependencies=[Depends(get_current_user)])
async def get_wetland_chart(wetland_id: int, sensor_type: SensorType = Query("temperature")):
    """Last 24 readings of one sensor type, oldest first, for the trend chart."""
    try:
        return get_chart_series(wetland_id, sensor_type)

    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error building chart for wetland {wetland_id}")
        raise HTTPException(status_code=500, detail="Internal server error")
