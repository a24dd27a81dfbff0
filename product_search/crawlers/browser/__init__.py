"""Browser module - 공급자/세션/페이지 설정."""

from .providers import (
    BrowserProvider,
    LaunchedBrowser,
    LocalChromiumProvider,
    RemoteChromiumProvider,
    ServerlessChromiumProvider,
    resolve_backend,
    select_browser_provider,
)
from .session import browser_session
from .pages import configure_page, new_configured_context

__all__ = [
    "BrowserProvider",
    "LaunchedBrowser",
    "LocalChromiumProvider",
    "RemoteChromiumProvider",
    "ServerlessChromiumProvider",
    "resolve_backend",
    "select_browser_provider",
    "browser_session",
    "configure_page",
    "new_configured_context",
]
