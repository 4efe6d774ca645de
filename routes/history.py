"""
SKU history API routes.

Search stored SKUs with a global query (sku, product group, product
category, color) and optional per-column substring filters.
"""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
import structlog

from models.history import HistoryFilters, HistoryResponse
from services.history_service import get_history_service
from exceptions import AppError

logger = structlog.get_logger(__name__)

router = APIRouter()


# ===================
# EXCEPTION HANDLER
# ===================

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


# ===================
# ROUTES
# ===================

@router.get("", response_model=HistoryResponse)
async def search_history(
    q: str = Query("", description="Search SKU, product group, category, color"),
    sku: str = Query("", description="SKU contains"),
    product_group: str = Query("", alias="productGroup"),
    product_category: str = Query("", alias="productCategory"),
    color: str = Query(""),
    size: str = Query(""),
    style: str = Query(""),
    location: str = Query(""),
    fabric: str = Query(""),
    nature: str = Query(""),
    vendor_code: str = Query("", alias="vendorCode"),
    cost: str = Query(""),
    created_by: str = Query("", alias="createdBy"),
):
    """
    List stored SKUs matching the search and column filters.

    Filters are case-insensitive substring matches combined with AND.

    Raises:
        503: Record store unavailable
    """
    try:
        filters = HistoryFilters(
            sku=sku,
            product_group=product_group,
            product_category=product_category,
            color=color,
            size=size,
            style=style,
            location=location,
            fabric=fabric,
            nature=nature,
            vendor_code=vendor_code,
            cost=cost,
            created_by=created_by,
        )

        service = get_history_service()
        return service.search(query=q, filters=filters)

    except Exception as e:
        return handle_error(e)
