"""라우트 공용 의존성 (싱글톤)"""

from typing import Optional

from fastapi import Depends

from product_search.core.config import settings
from product_search.crawlers import PageProbe, SearchExtractor
from product_search.crawlers.browser import BrowserProvider, select_browser_provider
from product_search.engine import SearchOrchestrator

_provider: Optional[BrowserProvider] = None
_orchestrator: Optional[SearchOrchestrator] = None


def get_browser_provider() -> BrowserProvider:
    """BrowserProvider 싱글톤 (환경 감지는 최초 1회)"""
    global _provider
    if _provider is None:
        _provider = select_browser_provider(settings)
    return _provider


def get_orchestrator(
    provider: BrowserProvider = Depends(get_browser_provider),
) -> SearchOrchestrator:
    """SearchOrchestrator 싱글톤

    오케스트레이터/추출기는 상태가 없고, 브라우저 세션은 요청마다 새로 띄웁니다.
    """
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = SearchOrchestrator(SearchExtractor(provider, settings), settings)
    return _orchestrator


def get_page_probe(
    provider: BrowserProvider = Depends(get_browser_provider),
) -> PageProbe:
    return PageProbe(provider, settings)


def reset_dependencies() -> None:
    """테스트/재설정용 싱글톤 초기화"""
    global _provider, _orchestrator
    _provider = None
    _orchestrator = None
