"""
Dropdown option API routes.

Options are cached in memory; POST /refresh refetches them from the
record store.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
import structlog

from models.option import DropdownData
from services.option_service import get_option_service
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

@router.get("", response_model=DropdownData)
async def get_options():
    """
    Get canonical dropdown options for every category.

    Loads from the record store on first call.

    Raises:
        503: Option source unavailable
    """
    try:
        service = get_option_service()
        return service.get_options()

    except Exception as e:
        return handle_error(e)


@router.post("/refresh", response_model=DropdownData)
async def refresh_options():
    """
    Refetch dropdown options from the record store.

    Raises:
        503: Option source unavailable
    """
    try:
        service = get_option_service()
        return service.refresh()

    except Exception as e:
        return handle_error(e)
