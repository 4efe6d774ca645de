"""
Dashboard schemas for aggregate SKU statistics.
"""

from pydantic import Field
from typing import Optional

from models.base import BaseSchema


class CountItem(BaseSchema):
    """Named count, one bar or slice of a breakdown chart."""

    name: str
    value: int


class DashboardSummary(BaseSchema):
    """Aggregates over submissions within the cost range."""

    min_cost: Optional[float] = Field(None, description="Applied lower bound (inclusive)")
    max_cost: Optional[float] = Field(None, description="Applied upper bound (inclusive)")
    total_skus: int
    total_value: float
    avg_cost: float
    group_counts: list[CountItem]
    category_counts: list[CountItem]
    color_counts: list[CountItem] = Field(..., description="Top 10 colors by count")
    fabric_counts: list[CountItem]
