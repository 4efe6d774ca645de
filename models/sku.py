"""
SKU record schemas for validation and serialization.

SKUFormData is the in-progress attribute record a user composes;
SKUSubmission is a record already stored by the record store.
"""

from pydantic import Field, field_validator
from typing import Any

from models.base import BaseSchema


# Fields in the fixed order used for completeness checks and error
# messages: (attribute, human-readable name)
REQUIRED_FIELDS: list[tuple[str, str]] = [
    ("product_group", "Product Group"),
    ("product_category", "Product Category"),
    ("color", "Color"),
    ("size", "Size"),
    ("style", "Style"),
    ("location", "Location"),
    ("fabric", "Fabric"),
    ("nature", "Nature"),
    ("vendor_code", "Vendor Code"),
    ("cost", "Cost"),
]


def _scalar_to_str(v: Any) -> Any:
    """Sheets hand back numbers and booleans for auto-typed cells."""
    if v is None:
        return ""
    if isinstance(v, bool):
        return "TRUE" if v else "FALSE"
    if isinstance(v, (int, float)):
        return str(v)
    return v


class SKUFormData(BaseSchema):
    """
    Attribute record being composed.

    Any field may be empty while composing. Whitespace is trimmed on
    the way in, so a blank field arrives as "".
    """

    product_group: str = Field("", description="Product group, e.g. Kurta")
    product_category: str = Field("", description="Product category")
    color: str = Field("", description="Color")
    size: str = Field("", description="Size code, used raw")
    style: str = Field("", description="Style number, used raw")
    location: str = Field("", description="Stock location")
    fabric: str = Field("", description="Fabric")
    nature: str = Field("", description="Nature (printed, solid, ...)")
    vendor_code: str = Field("", description="Vendor code")
    cost: str = Field("", description="Cost as a decimal string", examples=["500", "1250.75"])

    @field_validator("*", mode="before")
    @classmethod
    def coerce_scalars(cls, v: Any) -> Any:
        return _scalar_to_str(v)


class SKUSubmission(SKUFormData):
    """
    Record as stored by the record store.

    Missing columns come back as empty strings.
    """

    sku: str = Field("", description="Assembled SKU")
    created_by: str = Field("", description="Username of the submitter")
    timestamp: str = Field("", description="Creation time as sent by the store")


class SKUSubmitRequest(SKUFormData):
    """Submission payload: the attribute record plus the submitting user."""

    username: str = Field("", description="Username recorded as createdBy")


class SKUPreviewResponse(BaseSchema):
    """Live preview of the SKU for the current field state."""

    sku: str
    complete: bool
    missing_fields: list[str]


class SKUSubmitResponse(BaseSchema):
    """Result of a successful submission."""

    sku: str
    submission: SKUSubmission
    next_record: SKUFormData = Field(..., description="Fresh record with the next style number")


class StyleNumberResponse(BaseSchema):
    """Newly issued style number."""

    style: str


class CostEncodeResponse(BaseSchema):
    cost: str
    code: str


class CostDecodeResponse(BaseSchema):
    code: str
    cost: int
