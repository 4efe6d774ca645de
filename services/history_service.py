"""
SKU history service.

Fetches stored submissions and filters them with a global search plus
independent per-column substring filters.
"""

from typing import Iterable, Mapping, Optional
from pydantic import ValidationError as PydanticValidationError
import structlog

from integrations.sheets import get_sheets_client
from models.history import HistoryFilters, HistoryResponse
from models.sku import SKUSubmission

logger = structlog.get_logger(__name__)


# Fields searched by the global query
GLOBAL_SEARCH_FIELDS = ("sku", "product_group", "product_category", "color")

# Column filter name (as used by the API) -> attribute
COLUMN_FILTER_FIELDS: dict[str, str] = {
    "sku": "sku",
    "productGroup": "product_group",
    "productCategory": "product_category",
    "color": "color",
    "size": "size",
    "style": "style",
    "location": "location",
    "fabric": "fabric",
    "nature": "nature",
    "vendorCode": "vendor_code",
    "cost": "cost",
    "createdBy": "created_by",
}


def _field_text(record: SKUSubmission, attribute: str) -> str:
    return str(getattr(record, attribute, "") or "").lower()


def filter_submissions(
    records: Iterable[SKUSubmission],
    global_query: str = "",
    column_filters: Optional[Mapping[str, str]] = None
) -> list[SKUSubmission]:
    """
    Filter submissions, keeping input order.

    A record passes when the global query (if any) is a substring of
    its sku, product group, product category or color, AND every
    non-empty column filter is a substring of its column. All
    comparisons are case-insensitive.

    Args:
        records: Submissions to filter
        global_query: Free-text search (trimmed; empty matches all)
        column_filters: Column name -> substring; accepts API names
            ("vendorCode") or attribute names ("vendor_code")

    Returns:
        Matching submissions
    """
    query = (global_query or "").strip().lower()

    active = []
    for name, value in (column_filters or {}).items():
        if not value:
            continue
        attribute = COLUMN_FILTER_FIELDS.get(name, name)
        if attribute not in COLUMN_FILTER_FIELDS.values():
            continue
        active.append((attribute, str(value).lower()))

    matches = []
    for record in records:
        if query and not any(query in _field_text(record, f) for f in GLOBAL_SEARCH_FIELDS):
            continue
        if all(needle in _field_text(record, attribute) for attribute, needle in active):
            matches.append(record)

    return matches


class HistoryService:
    """
    SKU history business logic.

    Records are fetched fresh on every call; the store owns them.
    """

    def __init__(self):
        self.client = get_sheets_client()

    def get_all(self) -> list[SKUSubmission]:
        """
        Fetch all stored submissions.

        Rows that cannot be read as a submission are skipped and logged.

        Raises:
            HistorySourceError: If the record store cannot be reached
        """
        rows = self.client.fetch_submissions()

        records = []
        for index, row in enumerate(rows):
            try:
                records.append(SKUSubmission.model_validate(row))
            except PydanticValidationError as e:
                logger.warning(
                    "submission_row_skipped",
                    row=index,
                    sku=row.get("sku"),
                    errors=e.error_count()
                )
        return records

    def search(
        self,
        query: str = "",
        filters: Optional[HistoryFilters] = None
    ) -> HistoryResponse:
        """
        Fetch and filter submissions.

        Args:
            query: Global search text
            filters: Column filters

        Returns:
            Matching submissions with total and matched counts
        """
        records = self.get_all()
        active = filters.active() if filters else {}

        matches = filter_submissions(records, query, active)

        logger.info(
            "history_searched",
            query=query or None,
            filters=list(active),
            total=len(records),
            matched=len(matches)
        )

        return HistoryResponse(
            data=matches,
            total=len(records),
            matched=len(matches)
        )


# Singleton instance
_history_service: Optional[HistoryService] = None


def get_history_service() -> HistoryService:
    """Get or create HistoryService instance."""
    global _history_service
    if _history_service is None:
        _history_service = HistoryService()
    return _history_service
