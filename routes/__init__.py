"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.options import router as options_router
from routes.skus import router as skus_router
from routes.history import router as history_router
from routes.dashboard import router as dashboard_router

__all__ = [
    "options_router",
    "skus_router",
    "history_router",
    "dashboard_router",
]
