"""
SKU assembly and completeness checks.

SKU layout (nine dash-separated tokens):

    <category alias><group alias>-<color>-<size>-<style>-<location>-<fabric>-<nature>-<vendor>-<cost>

Example: "WMKU-BK-XL-101-DL-CT-PR-VND001-WCC"

Empty fields show as dash runs of the field's usual width so the
layout stays readable in live previews.
"""

from typing import Optional

from models.option import OptionCategory
from models.sku import SKUFormData, REQUIRED_FIELDS
from services.alias_service import AliasResolver
from utils.cost_cipher import encode_cost

SEPARATOR = "-"

# Placeholder per empty token
GROUP_PLACEHOLDER = "---"
COLOR_PLACEHOLDER = "---"
SIZE_PLACEHOLDER = "--"
STYLE_PLACEHOLDER = "---"
LOCATION_PLACEHOLDER = "---"
FABRIC_PLACEHOLDER = "---"
NATURE_PLACEHOLDER = "---"
VENDOR_PLACEHOLDER = "------"
COST_PLACEHOLDER = "----"


def assemble_sku(record: SKUFormData, resolver: Optional[AliasResolver] = None) -> str:
    """
    Build the SKU string for the current field values.

    Pure: the same record and options always give the same SKU.

    Args:
        record: Attribute record (fields may be empty)
        resolver: Alias resolver; without one only fallback aliases apply

    Returns:
        Dash-separated SKU
    """
    resolver = resolver or AliasResolver()
    resolve = resolver.resolve

    category_alias = resolve(OptionCategory.PRODUCT_CATEGORIES, record.product_category)
    group_alias = resolve(OptionCategory.PRODUCT_GROUPS, record.product_group)

    if category_alias and group_alias:
        first = f"{category_alias}{group_alias}"
    else:
        first = record.product_group or GROUP_PLACEHOLDER

    tokens = [
        first,
        resolve(OptionCategory.COLORS, record.color) or record.color or COLOR_PLACEHOLDER,
        record.size or SIZE_PLACEHOLDER,
        record.style or STYLE_PLACEHOLDER,
        resolve(OptionCategory.LOCATIONS, record.location) or record.location or LOCATION_PLACEHOLDER,
        resolve(OptionCategory.FABRICS, record.fabric) or record.fabric or FABRIC_PLACEHOLDER,
        resolve(OptionCategory.NATURES, record.nature) or record.nature or NATURE_PLACEHOLDER,
        resolve(OptionCategory.VENDOR_CODES, record.vendor_code) or record.vendor_code or VENDOR_PLACEHOLDER,
        encode_cost(record.cost) if record.cost else COST_PLACEHOLDER,
    ]

    return SEPARATOR.join(tokens)


# ===================
# COMPLETENESS
# ===================

def missing_fields(record: SKUFormData) -> list[str]:
    """
    List the empty required fields.

    Args:
        record: Attribute record

    Returns:
        Human-readable field names, in form order
    """
    return [label for name, label in REQUIRED_FIELDS if not getattr(record, name)]


def is_complete(record: SKUFormData) -> bool:
    """True when all ten fields are filled in."""
    return not missing_fields(record)
