"""Playwright context/page 설정 및 보조 함수.

컨텍스트 생성(UA, 로캘, 헤더), 리소스 차단 라우팅, 네비게이션 오류 매핑을
추출기/프로브가 공통으로 사용하도록 분리합니다.
"""

from __future__ import annotations

from playwright.async_api import Browser, BrowserContext, Page, Request, Route
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from product_search.core.config import Settings
from product_search.core.exceptions import (
    BrowserException,
    NavigationFailedException,
    NavigationTimeoutException,
)
from product_search.core.logging import logger


BLOCKED_RESOURCE_TYPES = frozenset({"image", "media", "font", "stylesheet"})


async def new_configured_context(browser: Browser, config: Settings) -> BrowserContext:
    return await browser.new_context(
        user_agent=config.user_agent,
        locale=config.locale,
        extra_http_headers={
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": config.accept_language,
        },
    )


async def _block_heavy_resources(route: Route, request: Request) -> None:
    # 페이지가 이미 닫힌 뒤 도착한 요청은 abort/continue 자체가 실패할 수 있음
    try:
        if request.resource_type in BLOCKED_RESOURCE_TYPES:
            await route.abort()
        else:
            await route.continue_()
    except PlaywrightError:
        return


async def configure_page(page: Page, config: Settings) -> Page:
    """타임아웃 기본값과 (옵션) 리소스 차단을 적용합니다.

    추출은 렌더링된 화면이 아니라 마크업을 읽으므로 이미지/스타일시트/폰트를
    막아도 결과는 같습니다.
    """
    page.set_default_timeout(config.search_control_timeout_ms)
    page.set_default_navigation_timeout(config.navigation_timeout_ms)

    if config.block_resources:
        await page.route("**/*", _block_heavy_resources)

    return page


async def open_page(browser: Browser, config: Settings) -> Page:
    """UA/헤더가 적용된 새 컨텍스트에서 설정 완료된 Page를 엽니다.

    Raises:
        BrowserException: 컨텍스트/페이지 생성 실패
    """
    try:
        context = await new_configured_context(browser, config)
        page = await context.new_page()
        return await configure_page(page, config)
    except PlaywrightError as e:
        raise BrowserException(f"Failed to open page: {e}") from e


async def navigate(page: Page, url: str, config: Settings) -> None:
    """url로 이동하고 네트워크가 잠잠해질 때까지(wait_until) 대기합니다.

    Raises:
        NavigationTimeoutException: 대기 조건이 시간 안에 충족되지 않음
        NavigationFailedException: 그 외 네비게이션 오류 (연결 실패 등)
    """
    logger.debug(f"[Browser] goto {url} (wait_until={config.wait_until})")
    try:
        await page.goto(url, wait_until=config.wait_until, timeout=config.navigation_timeout_ms)
    except PlaywrightTimeoutError as e:
        raise NavigationTimeoutException("goto", config.navigation_timeout_ms, details={"url": url}) from e
    except PlaywrightError as e:
        raise NavigationFailedException(url, str(e)) from e
