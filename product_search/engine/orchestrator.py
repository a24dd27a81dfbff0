"""Search Orchestrator - Main Engine Entry Point

1. 검색어 검증 (브라우저 실행 전 단락)
2. 전체 하드 타임아웃 아래에서 SearchExtractor 실행
3. 예외 → ExtractionOutcome 매핑 (호출자에게 예외를 전파하지 않음)
"""

import asyncio
from time import monotonic
from typing import Optional, Protocol

from product_search.core.config import Settings, settings as default_settings
from product_search.core.exceptions import (
    BrowserException,
    ExtractionException,
    InvalidQueryException,
    NavigationFailedException,
    NavigationTimeoutException,
    NoResultsFoundException,
    ParsingException,
    SearchControlNotFoundException,
    TimeoutException,
)
from product_search.core.logging import logger, sanitize_for_log
from product_search.core.security import SecurityValidator
from product_search.crawlers.result import ProductRecord

from .result import ExtractionOutcome, ExtractionStatus


class Extractor(Protocol):
    async def extract(self, query: str) -> list[ProductRecord]:
        ...


_STATUS_BY_EXCEPTION: tuple[tuple[type[ExtractionException], ExtractionStatus], ...] = (
    (NavigationTimeoutException, ExtractionStatus.NAVIGATION_TIMEOUT),
    (NavigationFailedException, ExtractionStatus.NAVIGATION_FAILED),
    (SearchControlNotFoundException, ExtractionStatus.SEARCH_CONTROL_NOT_FOUND),
    (BrowserException, ExtractionStatus.BROWSER_ERROR),
    (ParsingException, ExtractionStatus.PARSE_ERROR),
)


def status_for_exception(exc: ExtractionException) -> ExtractionStatus:
    for exc_type, status in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status
    return ExtractionStatus.INTERNAL_ERROR


class SearchOrchestrator:
    """검색 추출 오케스트레이터

    어떤 경로로 끝나든 ExtractionOutcome을 반환합니다.
    """

    def __init__(self, extractor: Extractor, config: Optional[Settings] = None):
        """
        Args:
            extractor: extract(query) 를 구현한 추출기
            config: 설정 (기본값: 전역 settings)
        """
        if extractor is None:
            raise ValueError("extractor must not be None")
        self.extractor = extractor
        self.config = config or default_settings

    async def search(self, query: Optional[str]) -> ExtractionOutcome:
        """검색어 검증 → 추출 → 결과 매핑"""
        try:
            search_query = SecurityValidator.validate_query(query, self.config.max_query_length)
        except InvalidQueryException as e:
            logger.info(f"[Engine] Invalid query rejected: {e.details.get('reason', e.message)}")
            return ExtractionOutcome.invalid_query(query, e.details.get("reason", e.message))

        safe_query = sanitize_for_log(search_query)
        start = monotonic()

        def elapsed_ms() -> float:
            return (monotonic() - start) * 1000

        try:
            products = await asyncio.wait_for(
                self.extractor.extract(search_query),
                timeout=self.config.extract_timeout_s,
            )
            return ExtractionOutcome.success(products, query=search_query, elapsed_ms=elapsed_ms())

        except NoResultsFoundException:
            logger.info(f"[Engine] No results: query='{safe_query}'")
            return ExtractionOutcome.no_results(query=search_query, elapsed_ms=elapsed_ms())

        except InvalidQueryException as e:
            return ExtractionOutcome.invalid_query(search_query, e.message)

        except asyncio.TimeoutError:
            timeout_error = TimeoutException("extract", self.config.extract_timeout_s)
            logger.error(f"[Engine] {timeout_error} query='{safe_query}'")
            return ExtractionOutcome.failure(
                ExtractionStatus.TIMEOUT,
                query=search_query,
                elapsed_ms=elapsed_ms(),
                error=timeout_error.message,
                error_code=timeout_error.error_code,
            )

        except SearchControlNotFoundException as e:
            # 네비게이션 장애와 구분: 대상 사이트 마크업 변경(셀렉터 드리프트) 신호
            logger.error(f"[Engine] Selector drift - search control missing: {e} query='{safe_query}'")
            return ExtractionOutcome.failure(
                ExtractionStatus.SEARCH_CONTROL_NOT_FOUND,
                query=search_query,
                elapsed_ms=elapsed_ms(),
                error=e.message,
                error_code=e.error_code,
            )

        except (NavigationTimeoutException, NavigationFailedException) as e:
            logger.warning(f"[Engine] Navigation failure: {e} query='{safe_query}'")
            return ExtractionOutcome.failure(
                status_for_exception(e),
                query=search_query,
                elapsed_ms=elapsed_ms(),
                error=e.message,
                error_code=e.error_code,
            )

        except ExtractionException as e:
            logger.error(f"[Engine] Extraction failed: {e} query='{safe_query}'")
            return ExtractionOutcome.failure(
                status_for_exception(e),
                query=search_query,
                elapsed_ms=elapsed_ms(),
                error=e.message,
                error_code=e.error_code,
            )

        except Exception as e:
            logger.error(
                f"[Engine] Unexpected error: query='{safe_query}', error={type(e).__name__}",
                exc_info=True,
            )
            return ExtractionOutcome.failure(
                ExtractionStatus.INTERNAL_ERROR,
                query=search_query,
                elapsed_ms=elapsed_ms(),
                error=f"{type(e).__name__}: {e}",
                error_code="INTERNAL_ERROR",
            )
