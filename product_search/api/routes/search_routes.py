"""Search Routes - HTTP Layer

쿼리 파라미터를 Engine Layer(SearchOrchestrator)로 넘기고,
ExtractionOutcome을 응답 객체로 변환하는 Translator 역할만 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from product_search.core.config import settings
from product_search.core.logging import logger
from product_search.core.security import log_request
from product_search.engine import ExtractionOutcome, ExtractionStatus, SearchOrchestrator
from product_search.schemas.product_schema import ProductItem, ProductSearchResponse

from .dependencies import get_orchestrator

router = APIRouter(prefix="/api", tags=["search"], dependencies=[Depends(log_request)])


_ERROR_MESSAGES = {
    ExtractionStatus.INVALID_QUERY: "No query provided",
    ExtractionStatus.NO_RESULTS: "No products found",
}
_GENERIC_ERROR = "Something went wrong"


def cache_control_for(outcome: ExtractionOutcome) -> str:
    """HTTP 캐시 힌트 (성공/결과없음만 짧게 재사용 허용)"""
    if outcome.status in (ExtractionStatus.SUCCESS, ExtractionStatus.NO_RESULTS):
        return (
            f"public, s-maxage={settings.cache_max_age_s}, "
            f"stale-while-revalidate={settings.cache_stale_while_revalidate_s}"
        )
    return "no-store"


def to_response(outcome: ExtractionOutcome) -> ProductSearchResponse:
    if outcome.is_success:
        return ProductSearchResponse(
            success=True,
            products=[ProductItem.from_record(p) for p in outcome.products],
            status=outcome.http_status,
        )

    # 내부 오류 상세는 로그에만 남기고 클라이언트에는 일반 메시지
    return ProductSearchResponse(
        success=False,
        error=_ERROR_MESSAGES.get(outcome.status, _GENERIC_ERROR),
        status=outcome.http_status,
    )


@router.get(
    "/searchprod",
    response_model=ProductSearchResponse,
    response_model_exclude_none=True,
)
async def search_products(
    response: Response,
    query: Optional[str] = Query(None, description="검색어"),
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """상품 검색 API

    Flow:
        1. 검색어 검증 (빈 검색어 → 400, 브라우저 미실행)
        2. Engine에 위임 (브라우저 → 검색 → 추출)
        3. 결과를 응답으로 변환 (200 / 404 / 500)
    """
    outcome = await orchestrator.search(query)

    response.status_code = outcome.http_status
    response.headers["Cache-Control"] = cache_control_for(outcome)

    if outcome.is_success:
        logger.info(f"[API] Search success: products={len(outcome.products)}, elapsed_ms={outcome.elapsed_ms:.0f}")
    elif outcome.is_error:
        logger.warning(f"[API] Search failed: status={outcome.status.value}, error_code={outcome.error_code}")

    return to_response(outcome)
