"""페이지 프로브 - 브라우저 동작 확인용 진단 기능.

설정된 probe_url 하나만 열어 문서 제목 또는 첫 h1 텍스트를 돌려줍니다.
호출자가 대상 URL을 지정할 수 없습니다 (내부망 접근 차단).
검색 추출과 같은 세션/네비게이션 규칙을 따릅니다.
"""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Error as PlaywrightError

from product_search.core.config import Settings, settings as default_settings
from product_search.core.exceptions import ParsingException
from product_search.core.logging import logger

from .browser import BrowserProvider, browser_session
from .browser.pages import navigate, open_page
from .parsing import parse_first_heading


class PageProbe:
    def __init__(self, provider: BrowserProvider, config: Optional[Settings] = None):
        if provider is None:
            raise ValueError("provider must not be None")
        self.provider = provider
        self.config = config or default_settings

    async def fetch_title(self) -> str:
        """probe_url 의 document.title"""
        target = self.config.probe_url
        async with browser_session(self.provider) as browser:
            page = await open_page(browser, self.config)
            await navigate(page, target, self.config)
            try:
                title = await page.title()
            except PlaywrightError as e:
                raise ParsingException(f"failed to read title: {e}") from e

        logger.debug(f"[Probe] title fetched: url={target}")
        return (title or "").strip()

    async def fetch_heading(self) -> str:
        """probe_url 의 첫 번째 h1 텍스트"""
        target = self.config.probe_url
        async with browser_session(self.provider) as browser:
            page = await open_page(browser, self.config)
            await navigate(page, target, self.config)
            try:
                html = await page.content()
            except PlaywrightError as e:
                raise ParsingException(f"failed to capture page content: {e}") from e

        heading = parse_first_heading(html)
        logger.debug(f"[Probe] heading fetched: url={target}")
        return heading
