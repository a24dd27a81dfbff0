"""Search Extractor - 사이트 검색 후 결과 카드 추출 (Playwright).

launch → page → UA/리소스 차단 → 사이트 루트 이동 → 검색창 입력 →
Enter + 네비게이션 대기 → HTML 캡처 → 파싱 → 브라우저 종료
"""

from __future__ import annotations

from typing import List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from product_search.core.config import Settings, settings as default_settings
from product_search.core.exceptions import (
    InvalidQueryException,
    NavigationFailedException,
    NavigationTimeoutException,
    NoResultsFoundException,
    ParsingException,
    SearchControlNotFoundException,
)
from product_search.core.logging import logger, sanitize_for_log

from .browser import BrowserProvider, browser_session
from .browser.pages import navigate, open_page
from .parsing import parse_search_results
from .result import ProductRecord


class SearchExtractor:
    """검색어 하나당 독립 브라우저 세션으로 검색 결과를 추출합니다.

    세션은 호출마다 새로 띄우며 호출 간에 공유하지 않습니다.
    """

    def __init__(self, provider: BrowserProvider, config: Optional[Settings] = None):
        """
        Args:
            provider: 브라우저 공급자 (환경별 전략)
            config: 설정 (기본값: 전역 settings)
        """
        if provider is None:
            raise ValueError("provider must not be None")
        self.provider = provider
        self.config = config or default_settings

    async def extract(self, query: str) -> List[ProductRecord]:
        """검색 실행 후 상품 레코드 리스트 반환

        Args:
            query: 자유 텍스트 검색어

        Returns:
            카드 순서대로 정렬된 ProductRecord 리스트 (1개 이상)

        Raises:
            InvalidQueryException: 빈/공백 검색어 (브라우저 실행 전)
            BrowserException: 브라우저 실행/페이지 생성 실패
            NavigationTimeoutException: 네비게이션 대기 타임아웃
            NavigationFailedException: 사이트 접속 실패
            SearchControlNotFoundException: 검색창 셀렉터 불일치
            ParsingException: HTML 캡처/파싱 실패
            NoResultsFoundException: 결과 카드 0건
        """
        if query is None or not query.strip():
            raise InvalidQueryException("No query provided")
        search_query = query.strip()

        logger.info(f"[Extractor] Search started: query='{sanitize_for_log(search_query)}'")

        async with browser_session(self.provider) as browser:
            page = await open_page(browser, self.config)
            await navigate(page, self.config.target_url, self.config)
            await self._fill_search_box(page, search_query)
            await self._submit_and_wait(page)
            html = await self._capture_html(page)
            products = parse_search_results(html, self.config.target_url)

        if not products:
            raise NoResultsFoundException(search_query)

        logger.info(
            f"[Extractor] Search completed: query='{sanitize_for_log(search_query)}', products={len(products)}"
        )
        return products

    async def _fill_search_box(self, page: Page, query: str) -> None:
        selector = self.config.search_input_selector
        try:
            search_box = await page.wait_for_selector(
                selector,
                state="visible",
                timeout=self.config.search_control_timeout_ms,
            )
        except PlaywrightTimeoutError as e:
            raise SearchControlNotFoundException(selector) from e

        if search_box is None:
            raise SearchControlNotFoundException(selector)

        try:
            await search_box.fill(query)
        except PlaywrightError as e:
            raise SearchControlNotFoundException(selector, details={"selector": selector, "reason": str(e)}) from e

    async def _submit_and_wait(self, page: Page) -> None:
        """Enter 입력과 결과 페이지 네비게이션 대기를 하나의 동작으로 수행

        expect_navigation 블록에 들어가는 순간 대기가 등록되고, 그 안에서 키를 누릅니다.
        순차로 press → wait 하면 네비게이션 이벤트를 놓칠 수 있습니다.
        """
        try:
            async with page.expect_navigation(
                wait_until=self.config.wait_until,
                timeout=self.config.navigation_timeout_ms,
            ):
                await page.keyboard.press("Enter")
        except PlaywrightTimeoutError as e:
            raise NavigationTimeoutException("submit_search", self.config.navigation_timeout_ms) from e
        except PlaywrightError as e:
            raise NavigationFailedException(page.url or self.config.target_url, str(e)) from e

    async def _capture_html(self, page: Page) -> str:
        try:
            return await page.content()
        except PlaywrightError as e:
            raise ParsingException(f"failed to capture page content: {e}") from e
