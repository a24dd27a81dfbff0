"""API 엔드포인트 패키지 - export only."""

from .routes import (
    health_router,
    search_router,
    probe_router,
    get_browser_provider,
    get_orchestrator,
    get_page_probe,
)

__all__ = [
    "health_router",
    "search_router",
    "probe_router",
    "get_browser_provider",
    "get_orchestrator",
    "get_page_probe",
]
