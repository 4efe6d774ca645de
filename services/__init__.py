"""
Business logic services.

Each service handles one domain area.
"""

from services.alias_service import AliasResolver, FALLBACK_ALIASES
from services.option_service import (
    OptionService,
    get_option_service,
    canonicalize_options,
    canonicalize_payload,
)
from services.sku_service import assemble_sku, is_complete, missing_fields
from services.style_number_service import StyleNumberService, get_style_number_service
from services.submission_service import SubmissionService, get_submission_service
from services.history_service import HistoryService, get_history_service, filter_submissions
from services.dashboard_service import DashboardService, get_dashboard_service

__all__ = [
    "AliasResolver",
    "FALLBACK_ALIASES",
    "OptionService",
    "get_option_service",
    "canonicalize_options",
    "canonicalize_payload",
    "assemble_sku",
    "is_complete",
    "missing_fields",
    "StyleNumberService",
    "get_style_number_service",
    "SubmissionService",
    "get_submission_service",
    "HistoryService",
    "get_history_service",
    "filter_submissions",
    "DashboardService",
    "get_dashboard_service",
]
