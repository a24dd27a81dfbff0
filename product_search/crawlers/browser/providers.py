"""브라우저 공급자 (환경별 Chromium 실행 전략).

로컬 개발에서는 Playwright 번들 Chromium을, 호스팅(서버리스) 환경에서는
경량 Chromium 바이너리를, 별도 브라우저 풀이 있으면 CDP 원격 연결을 사용합니다.
선택은 앱 시작 시 한 번만 이루어지며 추출 로직은 환경을 알지 못합니다.
"""

from __future__ import annotations

import asyncio
import os
import platform
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

from playwright.async_api import Browser, Playwright, async_playwright

from product_search.core.config import Settings, settings as default_settings
from product_search.core.exceptions import BrowserException
from product_search.core.logging import logger


# 호스팅 환경 감지용 환경 변수
HOSTED_ENV_MARKERS = ("AWS_REGION", "VERCEL")

# 서버리스 Chromium에서 필요한 추가 플래그
SERVERLESS_ARGS = (
    "--single-process",
    "--no-zygote",
    "--disable-software-rasterizer",
    "--use-gl=swiftshader",
)


def build_launch_args(extra: tuple[str, ...] = ()) -> list[str]:
    args: list[str] = [
        "--disable-dev-shm-usage",
        "--disable-gpu",
        "--disable-background-networking",
        "--disable-background-timer-throttling",
        "--disable-renderer-backgrounding",
        "--disable-default-apps",
        "--disable-extensions",
        "--no-first-run",
        "--no-default-browser-check",
        *extra,
    ]

    if platform.system().lower() == "linux":
        args.extend(["--no-sandbox", "--disable-setuid-sandbox"])

    deduped: list[str] = []
    seen: set[str] = set()
    for a in args:
        if a not in seen:
            seen.add(a)
            deduped.append(a)
    return deduped


@dataclass
class LaunchedBrowser:
    """실행된 브라우저와 그 Playwright 드라이버 (함께 종료됨)"""

    browser: Browser
    playwright: Optional[Playwright] = None

    async def close(self) -> None:
        """브라우저를 닫고 드라이버를 정지합니다.

        브라우저 close가 실패해도 드라이버 stop은 시도하며, 첫 번째 오류를 다시 던집니다.
        """
        first_error: Optional[BaseException] = None
        try:
            await self.browser.close()
        except Exception as e:
            first_error = e
        if self.playwright is not None:
            try:
                await self.playwright.stop()
            except Exception as e:
                first_error = first_error or e
        if first_error is not None:
            raise first_error


class BrowserProvider(Protocol):
    """브라우저 공급자 프로토콜

    구현 예시:
        class LocalChromiumProvider:
            name = "local"

            async def launch(self) -> LaunchedBrowser:
                ...
    """

    name: str

    async def launch(self) -> LaunchedBrowser:
        """격리된 새 브라우저 프로세스/세션을 반환

        Raises:
            BrowserException: 실행/연결 실패
        """
        ...


class _PlaywrightProvider:
    """Playwright 드라이버 시작 + 브라우저 획득 공통 흐름"""

    name = "playwright"

    def __init__(self, launch_timeout_s: float):
        self.launch_timeout_s = launch_timeout_s

    async def _open_browser(self, pw: Playwright) -> Browser:
        raise NotImplementedError

    async def _start(self, started: list[Playwright]) -> Browser:
        pw = await async_playwright().start()
        started.append(pw)
        return await self._open_browser(pw)

    async def launch(self) -> LaunchedBrowser:
        # 드라이버 시작 + 브라우저 획득 전체가 하나의 마감 시간을 공유
        started: list[Playwright] = []
        try:
            logger.info(f"[Browser] Launching browser (backend={self.name})...")
            browser = await asyncio.wait_for(self._start(started), timeout=self.launch_timeout_s)
            logger.debug(f"[Browser] Browser ready (backend={self.name})")
            return LaunchedBrowser(browser=browser, playwright=started[0])
        except BrowserException:
            await self._stop_quietly(started)
            raise
        except asyncio.TimeoutError as e:
            await self._stop_quietly(started)
            raise BrowserException(
                f"Browser launch timed out after {self.launch_timeout_s}s",
                details={"backend": self.name},
            ) from e
        except Exception as e:
            await self._stop_quietly(started)
            raise BrowserException(
                f"Browser launch failed: {type(e).__name__}: {e}",
                details={"backend": self.name},
            ) from e
        except BaseException:
            # 상위 타임아웃에 의한 취소: 이미 시작된 드라이버도 정지
            await self._stop_quietly(started)
            raise

    @staticmethod
    async def _stop_quietly(started: list[Playwright]) -> None:
        for pw in started:
            try:
                await pw.stop()
            except Exception as e:
                logger.warning(f"[Browser] Failed to stop Playwright driver: {type(e).__name__}: {e}")


class LocalChromiumProvider(_PlaywrightProvider):
    """로컬 개발용: Playwright 번들 Chromium (headless)"""

    name = "local"

    async def _open_browser(self, pw: Playwright) -> Browser:
        return await pw.chromium.launch(
            headless=True,
            args=build_launch_args(),
            timeout=self.launch_timeout_s * 1000,
        )


class ServerlessChromiumProvider(_PlaywrightProvider):
    """호스팅 환경용: 미리 배포된 경량 Chromium 바이너리"""

    name = "serverless"

    def __init__(self, executable_path: str, launch_timeout_s: float):
        super().__init__(launch_timeout_s)
        self.executable_path = executable_path

    async def _open_browser(self, pw: Playwright) -> Browser:
        if not self.executable_path:
            raise BrowserException(
                "chromium_executable_path is required for the serverless backend",
                details={"backend": self.name},
            )
        return await pw.chromium.launch(
            headless=True,
            executable_path=self.executable_path,
            args=build_launch_args(SERVERLESS_ARGS),
            timeout=self.launch_timeout_s * 1000,
        )


class RemoteChromiumProvider(_PlaywrightProvider):
    """원격 브라우저(CDP) 연결"""

    name = "remote"

    def __init__(self, ws_endpoint: str, launch_timeout_s: float):
        super().__init__(launch_timeout_s)
        self.ws_endpoint = ws_endpoint

    async def _open_browser(self, pw: Playwright) -> Browser:
        if not self.ws_endpoint:
            raise BrowserException(
                "browser_ws_endpoint is required for the remote backend",
                details={"backend": self.name},
            )
        return await pw.chromium.connect_over_cdp(
            self.ws_endpoint,
            timeout=self.launch_timeout_s * 1000,
        )


def resolve_backend(config: Settings, environ: Optional[Mapping[str, str]] = None) -> str:
    """설정값(auto 포함)을 실제 backend 이름으로 결정"""
    backend = config.browser_backend
    if backend != "auto":
        return backend

    env = os.environ if environ is None else environ
    if any(env.get(marker) for marker in HOSTED_ENV_MARKERS):
        return "serverless"
    return "local"


def select_browser_provider(
    config: Optional[Settings] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BrowserProvider:
    """설정/환경에 맞는 BrowserProvider 생성 (Factory)"""
    config = config or default_settings
    backend = resolve_backend(config, environ)
    timeout_s = config.browser_launch_timeout_s

    if backend == "serverless":
        provider: BrowserProvider = ServerlessChromiumProvider(config.chromium_executable_path, timeout_s)
    elif backend == "remote":
        provider = RemoteChromiumProvider(config.browser_ws_endpoint, timeout_s)
    else:
        provider = LocalChromiumProvider(timeout_s)

    logger.info(f"[Browser] Selected browser backend: {provider.name}")
    return provider
