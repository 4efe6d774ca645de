"""
Dropdown option service.

Turns the loosely-structured option payload from the record store into
canonical Option lists, and keeps the latest lists in memory until the
next refresh.

Raw entries are decoded once into one of three shapes:
    StringOption  - a bare string, used as both value and label
    ObjectOption  - a mapping with value/label/alias
    Malformed     - anything else (dropped)
"""

from dataclasses import dataclass
import time
from typing import Any, Optional, Union
import structlog

from config import settings
from exceptions import OptionSourceError
from integrations.sheets import get_sheets_client
from models.option import DropdownData, Option, OptionCategory

logger = structlog.get_logger(__name__)


# Source keys per category, tried in order; first present one wins
CATEGORY_SOURCE_KEYS: dict[OptionCategory, tuple[str, ...]] = {
    OptionCategory.PRODUCT_GROUPS: ("Product Group", "Product Groups", "productGroups"),
    OptionCategory.PRODUCT_CATEGORIES: ("Product Category", "Product Categories", "productCategories"),
    OptionCategory.COLORS: ("Color", "Colors", "colors"),
    OptionCategory.SIZES: ("Size", "Sizes", "sizes"),
    OptionCategory.LOCATIONS: ("Location", "Locations", "locations"),
    OptionCategory.FABRICS: ("Fabric", "Fabrics", "fabrics"),
    OptionCategory.NATURES: ("Nature", "Natures", "natures"),
    OptionCategory.VENDOR_CODES: ("Vendor Code", "Vendor Codes", "vendorCodes"),
}


# ===================
# RAW OPTION SHAPES
# ===================

@dataclass(frozen=True)
class StringOption:
    text: str


@dataclass(frozen=True)
class ObjectOption:
    value: str
    label: str
    alias: Optional[str] = None


@dataclass(frozen=True)
class Malformed:
    raw: Any


RawOption = Union[StringOption, ObjectOption, Malformed]


def _text(v: Any) -> str:
    """Read a cell as text; numbers are kept, everything else is empty."""
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return ""


def decode_raw_option(item: Any) -> RawOption:
    """
    Classify one raw option entry.

    Args:
        item: Entry as sent by the source (string, mapping, or junk)

    Returns:
        StringOption, ObjectOption or Malformed
    """
    if isinstance(item, str):
        return StringOption(item)

    if isinstance(item, Option):
        return ObjectOption(value=item.value, label=item.label, alias=item.alias)

    if isinstance(item, dict):
        alias = item.get("alias")
        return ObjectOption(
            value=_text(item.get("value")),
            label=_text(item.get("label")),
            alias=_text(alias) if alias is not None else None,
        )

    return Malformed(item)


def to_option(raw: RawOption) -> Optional[Option]:
    """
    Build the canonical Option for a decoded entry.

    Returns None when the resolved value is empty.
    """
    if isinstance(raw, StringOption):
        value = label = raw.text
        alias = None
    elif isinstance(raw, ObjectOption):
        value = raw.value or raw.label
        label = raw.label or raw.value
        alias = raw.alias
    else:
        return None

    if not value:
        return None

    return Option(value=value, label=label, alias=alias)


def canonicalize_options(items: Any) -> list[Option]:
    """
    Canonicalize one category's raw entries.

    Order is preserved and duplicates are kept. Entries with no usable
    value are dropped. Never raises.

    Args:
        items: Raw entries (a non-list yields no options)

    Returns:
        Canonical options in source order
    """
    if not isinstance(items, (list, tuple)):
        return []

    options = []
    for item in items:
        option = to_option(decode_raw_option(item))
        if option is not None:
            options.append(option)

    return options


def canonicalize_payload(raw: Any) -> DropdownData:
    """
    Canonicalize the full option payload.

    Each category accepts singular or plural source keys; the first
    present one wins. Never raises.

    Args:
        raw: Category -> entries mapping from the source

    Returns:
        DropdownData with every category filled (possibly empty)
    """
    if isinstance(raw, DropdownData):
        return raw

    if not isinstance(raw, dict):
        logger.warning("option_payload_not_mapping", payload_type=type(raw).__name__)
        return DropdownData()

    lists = {}
    for category, keys in CATEGORY_SOURCE_KEYS.items():
        entries = next((raw[key] for key in keys if raw.get(key) is not None), [])
        lists[category.value] = canonicalize_options(entries)

    return DropdownData(**lists)


class OptionService:
    """
    Dropdown options held in memory.

    Loaded on first use and replaced on refresh. A failed load is
    remembered for retry_seconds so previews do not wait on a source
    that is down.
    """

    def __init__(self):
        self.client = get_sheets_client()
        self.retry_seconds = settings.options_retry_seconds
        self._options: Optional[DropdownData] = None
        self._failed_at: Optional[float] = None

    def refresh(self) -> DropdownData:
        """
        Fetch and canonicalize option data.

        Raises:
            OptionSourceError: If the source cannot be reached
        """
        try:
            raw = self.client.fetch_dropdown_data()
        except OptionSourceError:
            self._failed_at = time.monotonic()
            raise

        options = canonicalize_payload(raw)

        self._options = options
        self._failed_at = None

        logger.info(
            "options_loaded",
            **{category.value: len(options.options_for(category)) for category in OptionCategory}
        )
        return options

    def get_options(self) -> DropdownData:
        """
        Get cached options, loading them on first use.

        Raises:
            OptionSourceError: If options are not loaded and the source fails
        """
        if self._options is None:
            return self.refresh()
        return self._options

    def get_options_or_empty(self) -> DropdownData:
        """
        Get options for alias resolution.

        Falls back to empty lists when the source is unavailable, so
        resolution degrades to the fallback table. After a failure the
        source is not retried until retry_seconds have passed.
        """
        if self._options is not None:
            return self._options

        if self._failed_at is not None and time.monotonic() - self._failed_at < self.retry_seconds:
            return DropdownData()

        try:
            return self.refresh()
        except OptionSourceError as e:
            logger.warning("options_unavailable_using_fallback", error=e.message)
            return DropdownData()


# Singleton instance
_option_service: Optional[OptionService] = None


def get_option_service() -> OptionService:
    """Get or create OptionService instance."""
    global _option_service
    if _option_service is None:
        _option_service = OptionService()
    return _option_service
