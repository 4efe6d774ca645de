"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema
from models.option import (
    OptionCategory,
    Option,
    DropdownData,
)
from models.sku import (
    REQUIRED_FIELDS,
    SKUFormData,
    SKUSubmission,
    SKUSubmitRequest,
    SKUPreviewResponse,
    SKUSubmitResponse,
    StyleNumberResponse,
    CostEncodeResponse,
    CostDecodeResponse,
)
from models.history import (
    HistoryFilters,
    HistoryResponse,
)
from models.dashboard import (
    CountItem,
    DashboardSummary,
)

__all__ = [
    # Base
    "BaseSchema",

    # Options
    "OptionCategory",
    "Option",
    "DropdownData",

    # SKU
    "REQUIRED_FIELDS",
    "SKUFormData",
    "SKUSubmission",
    "SKUSubmitRequest",
    "SKUPreviewResponse",
    "SKUSubmitResponse",
    "StyleNumberResponse",
    "CostEncodeResponse",
    "CostDecodeResponse",

    # History
    "HistoryFilters",
    "HistoryResponse",

    # Dashboard
    "CountItem",
    "DashboardSummary",
]
