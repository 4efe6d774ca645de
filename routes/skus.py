"""
SKU generation API routes.

Preview is side-effect free and meant to be called on every edit;
submission validates, stores and issues the next style number.
"""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
import structlog

from models.sku import (
    SKUFormData,
    SKUSubmitRequest,
    SKUPreviewResponse,
    SKUSubmitResponse,
    StyleNumberResponse,
    CostEncodeResponse,
    CostDecodeResponse,
)
from services.submission_service import get_submission_service
from services.style_number_service import get_style_number_service
from utils.cost_cipher import encode_cost, decode_cost
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

@router.get("/next-style", response_model=StyleNumberResponse)
async def next_style_number():
    """
    Issue the next style number for a new record.

    Each call consumes a number.
    """
    try:
        service = get_style_number_service()
        return StyleNumberResponse(style=service.next())

    except Exception as e:
        return handle_error(e)


@router.get("/next-style/peek", response_model=StyleNumberResponse)
async def peek_style_number():
    """
    Show the style number the next issue would return.

    Does not consume a number.
    """
    try:
        service = get_style_number_service()
        return StyleNumberResponse(style=service.peek())

    except Exception as e:
        return handle_error(e)


@router.post("/preview", response_model=SKUPreviewResponse)
async def preview_sku(data: SKUFormData):
    """
    Assemble the SKU for the current fields.

    Empty fields show as dash placeholders.
    """
    try:
        service = get_submission_service()
        return service.preview(data)

    except Exception as e:
        return handle_error(e)


@router.post("", response_model=SKUSubmitResponse, status_code=201)
async def submit_sku(data: SKUSubmitRequest):
    """
    Submit a complete record to the record store.

    Raises:
        422: Missing fields or username
        503: Record store unavailable
    """
    try:
        service = get_submission_service()
        record = SKUFormData(**data.model_dump(exclude={"username"}))
        return service.submit(record, data.username)

    except Exception as e:
        return handle_error(e)


# ===================
# COST CIPHER
# ===================

@router.get("/cost/encode", response_model=CostEncodeResponse)
async def encode_cost_value(
    cost: str = Query(..., description="Cost to encode, e.g. 1500")
):
    """Encode a cost as cipher letters ("---" if not a number)."""
    return CostEncodeResponse(cost=cost, code=encode_cost(cost))


@router.get("/cost/decode", response_model=CostDecodeResponse)
async def decode_cost_value(
    code: str = Query(..., description="Cipher letters, e.g. RWCC")
):
    """Decode cipher letters back to a whole-number cost."""
    return CostDecodeResponse(code=code, cost=decode_cost(code))
