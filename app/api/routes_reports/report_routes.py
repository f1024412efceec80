import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.routes_reports.schemas import WetlandReportOut
from app.core.security import get_current_user
from app.services.report_service import generate_report
from app.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Reports"])

DEFAULT_REPORT_DAYS = 30


@router.get("/wetlands/{wetland_id}", response_model=WetlandReportOut, dependencies=[Depends(get_current_user)])
async def get_wetland_report(
    wetland_id: int,
    start: Optional[datetime] = Query(None, description="Range start (ISO-8601), defaults to 30 days before end"),
    end: Optional[datetime] = Query(None, description="Range end (ISO-8601), defaults to now"),
):
    """
    Report for one wetland over an inclusive date range: readings, alert
    counts, averages, status distribution and health trend.
    """
    end = end or utcnow()
    start = start or end - timedelta(days=DEFAULT_REPORT_DAYS)

    try:
        return generate_report(wetland_id, start, end)

    except LookupError as e:
        logger.warning(f"Report requested for missing wetland {wetland_id}")
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception:
        logger.exception(f"Error generating report for wetland {wetland_id}")
        raise HTTPException(status_code=500, detail="Internal server error")
