"""API routes package."""

from .health_routes import router as health_router
from .search_routes import router as search_router
from .probe_routes import router as probe_router
from .dependencies import get_browser_provider, get_orchestrator, get_page_probe

__all__ = [
    "health_router",
    "search_router",
    "probe_router",
    "get_browser_provider",
    "get_orchestrator",
    "get_page_probe",
]
