"""
Dropdown option schemas.

Options come from the record store's reference sheet. Each selectable
attribute value has a lookup key, display text and an optional short
alias substituted into generated SKUs.
"""

from pydantic import ConfigDict, Field
from typing import Optional
from enum import Enum

from models.base import BaseSchema


class OptionCategory(str, Enum):
    """Attribute categories that carry a dropdown option list."""
    PRODUCT_GROUPS = "productGroups"
    PRODUCT_CATEGORIES = "productCategories"
    COLORS = "colors"
    SIZES = "sizes"
    LOCATIONS = "locations"
    FABRICS = "fabrics"
    NATURES = "natures"
    VENDOR_CODES = "vendorCodes"


class Option(BaseSchema):
    """
    Canonical dropdown option.

    Values are kept exactly as the source sent them; matching is
    normalized at lookup time instead.
    """

    model_config = ConfigDict(
        str_strip_whitespace=False,
        frozen=True
    )

    value: str = Field(..., min_length=1, description="Lookup key")
    label: str = Field(..., description="Display text")
    alias: Optional[str] = Field(None, description="Short code used in SKUs")


class DropdownData(BaseSchema):
    """Canonical option lists for every category, in source order."""

    product_groups: list[Option] = Field(default_factory=list)
    product_categories: list[Option] = Field(default_factory=list)
    colors: list[Option] = Field(default_factory=list)
    sizes: list[Option] = Field(default_factory=list)
    locations: list[Option] = Field(default_factory=list)
    fabrics: list[Option] = Field(default_factory=list)
    natures: list[Option] = Field(default_factory=list)
    vendor_codes: list[Option] = Field(default_factory=list)

    def options_for(self, category: OptionCategory) -> list[Option]:
        """Get the option list for a category."""
        return getattr(self, _FIELD_BY_CATEGORY[OptionCategory(category)])

    @property
    def is_empty(self) -> bool:
        return not any(self.options_for(category) for category in OptionCategory)


_FIELD_BY_CATEGORY = {
    OptionCategory.PRODUCT_GROUPS: "product_groups",
    OptionCategory.PRODUCT_CATEGORIES: "product_categories",
    OptionCategory.COLORS: "colors",
    OptionCategory.SIZES: "sizes",
    OptionCategory.LOCATIONS: "locations",
    OptionCategory.FABRICS: "fabrics",
    OptionCategory.NATURES: "natures",
    OptionCategory.VENDOR_CODES: "vendor_codes",
}
