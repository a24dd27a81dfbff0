"""브라우저 세션 스코프 관리.

요청 하나가 브라우저 세션 하나를 처음부터 끝까지 소유합니다.
성공/실패/취소 어떤 경로로 빠져나가도 세션은 반드시 종료됩니다.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Browser

from product_search.core.exceptions import ResourceCleanupException
from product_search.core.logging import logger

from .providers import BrowserProvider


@asynccontextmanager
async def browser_session(provider: BrowserProvider) -> AsyncIterator[Browser]:
    """격리된 브라우저 세션을 열고, 블록을 벗어나면 반드시 닫습니다.

    종료 실패는 ResourceCleanupException으로 로그만 남기고 삼킵니다.
    본문의 결과나 예외를 덮어쓰지 않기 위함입니다.

    Usage:
        async with browser_session(provider) as browser:
            context = await browser.new_context()
            ...
    """
    launched = await provider.launch()
    try:
        yield launched.browser
    finally:
        try:
            await launched.close()
            logger.debug("[Browser] Session closed")
        except Exception as e:
            cleanup_error = ResourceCleanupException("browser session", f"{type(e).__name__}: {e}")
            logger.error(f"[Browser] {cleanup_error}")
