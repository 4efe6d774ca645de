"""
Dashboard service for aggregate SKU statistics.

Totals and breakdowns over stored submissions, optionally limited to
a cost range. Submissions whose cost does not start with a number
are left out.
"""

from collections import Counter
from typing import Iterable, Optional
import structlog

from models.dashboard import CountItem, DashboardSummary
from models.sku import SKUSubmission
from services.history_service import get_history_service
from utils.cost_cipher import parse_cost

logger = structlog.get_logger(__name__)

TOP_COLORS = 10


def filter_by_cost(
    records: Iterable[SKUSubmission],
    min_cost: Optional[float] = None,
    max_cost: Optional[float] = None
) -> list[tuple[SKUSubmission, float]]:
    """
    Keep records whose cost lies within [min_cost, max_cost].

    Returns:
        (record, parsed cost) pairs in input order
    """
    kept = []
    for record in records:
        cost = parse_cost(record.cost)
        if cost is None:
            continue
        if min_cost is not None and cost < min_cost:
            continue
        if max_cost is not None and cost > max_cost:
            continue
        kept.append((record, cost))
    return kept


def count_by(records: Iterable[SKUSubmission], attribute: str) -> list[CountItem]:
    """Count records per attribute value, in first-seen order."""
    counts = Counter(getattr(record, attribute) for record in records)
    return [CountItem(name=name, value=value) for name, value in counts.items()]


def summarize(
    records: Iterable[SKUSubmission],
    min_cost: Optional[float] = None,
    max_cost: Optional[float] = None
) -> DashboardSummary:
    """
    Aggregate submissions within a cost range.

    Args:
        records: Stored submissions
        min_cost: Inclusive lower bound (None for no bound)
        max_cost: Inclusive upper bound (None for no bound)

    Returns:
        DashboardSummary
    """
    kept = filter_by_cost(records, min_cost, max_cost)
    selected = [record for record, _ in kept]

    total_skus = len(kept)
    total_value = sum(cost for _, cost in kept)
    avg_cost = total_value / total_skus if total_skus else 0.0

    colors = sorted(count_by(selected, "color"), key=lambda item: item.value, reverse=True)

    return DashboardSummary(
        min_cost=min_cost,
        max_cost=max_cost,
        total_skus=total_skus,
        total_value=total_value,
        avg_cost=avg_cost,
        group_counts=count_by(selected, "product_group"),
        category_counts=count_by(selected, "product_category"),
        color_counts=colors[:TOP_COLORS],
        fabric_counts=count_by(selected, "fabric"),
    )


class DashboardService:
    """Dashboard statistics over the record store."""

    def __init__(self):
        self.history = get_history_service()

    def get_summary(
        self,
        min_cost: Optional[float] = None,
        max_cost: Optional[float] = None
    ) -> DashboardSummary:
        """
        Fetch submissions and aggregate them.

        Raises:
            HistorySourceError: If the record store cannot be reached
        """
        records = self.history.get_all()
        summary = summarize(records, min_cost, max_cost)

        logger.info(
            "dashboard_summary_built",
            fetched=len(records),
            total_skus=summary.total_skus,
            min_cost=min_cost,
            max_cost=max_cost
        )
        return summary


# Singleton instance
_dashboard_service: Optional[DashboardService] = None


def get_dashboard_service() -> DashboardService:
    """Get or create DashboardService instance."""
    global _dashboard_service
    if _dashboard_service is None:
        _dashboard_service = DashboardService()
    return _dashboard_service
