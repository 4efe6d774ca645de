"""
SKU history schemas.
"""

from pydantic import Field

from models.base import BaseSchema
from models.sku import SKUSubmission


class HistoryFilters(BaseSchema):
    """
    Per-column substring filters.

    Empty filters impose no constraint.
    """

    sku: str = ""
    product_group: str = ""
    product_category: str = ""
    color: str = ""
    size: str = ""
    style: str = ""
    location: str = ""
    fabric: str = ""
    nature: str = ""
    vendor_code: str = ""
    cost: str = ""
    created_by: str = ""

    def active(self) -> dict[str, str]:
        """Non-empty filters keyed by attribute name."""
        return {name: value for name, value in self.model_dump().items() if value}


class HistoryResponse(BaseSchema):
    """Filtered history with counts ("Showing X of Y")."""

    data: list[SKUSubmission]
    total: int = Field(..., description="Records fetched from the store")
    matched: int = Field(..., description="Records passing the filters")
