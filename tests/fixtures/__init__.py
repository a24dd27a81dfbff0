"""테스트 자산 레이어

규칙:
- search_pages: 로직 없음 (HTML 문자열만)
- browser_doubles: 네트워크/브라우저 없이 동작하는 Playwright 더블
"""

from .search_pages import (
    BASE_URL,
    CARD_OUTSIDE_MAIN_SLOT_PAGE,
    EMPTY_RESULTS_PAGE,
    EXAMPLE_DOMAIN_PAGE,
    HOME_PAGE,
    SEARCH_RESULTS_PAGE,
    TITLELESS_RESULTS_PAGE,
)
from .browser_doubles import FakeBrowser, FakePage, FakeProvider

__all__ = [
    "BASE_URL",
    "CARD_OUTSIDE_MAIN_SLOT_PAGE",
    "EMPTY_RESULTS_PAGE",
    "EXAMPLE_DOMAIN_PAGE",
    "HOME_PAGE",
    "SEARCH_RESULTS_PAGE",
    "TITLELESS_RESULTS_PAGE",
    "FakeBrowser",
    "FakePage",
    "FakeProvider",
]
