"""
Dashboard API routes.
"""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from typing import Optional
import structlog

from models.dashboard import DashboardSummary
from services.dashboard_service import get_dashboard_service
from exceptions import AppError

logger = structlog.get_logger(__name__)

router = APIRouter()


def handle_error(e: Exception) -> JSONResponse:
    """Convert exception to JSON response."""
    if isinstance(e, AppError):
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_dict()
        )
    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred"
            }
        }
    )


@router.get("/summary", response_model=DashboardSummary)
async def get_summary(
    min_cost: Optional[float] = Query(None, description="Inclusive lower cost bound"),
    max_cost: Optional[float] = Query(None, description="Inclusive upper cost bound"),
):
    """
    Totals and breakdowns for SKUs within the cost range.

    Raises:
        503: Record store unavailable
    """
    try:
        service = get_dashboard_service()
        return service.get_summary(min_cost=min_cost, max_cost=max_cost)

    except Exception as e:
        return handle_error(e)
