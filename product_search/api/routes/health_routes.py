"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter, Depends

from product_search import __version__
from product_search.crawlers.browser import BrowserProvider
from product_search.schemas.product_schema import HealthResponse

from .dependencies import get_browser_provider

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(provider: BrowserProvider = Depends(get_browser_provider)):
    """
    헬스 체크 엔드포인트

    브라우저는 요청마다 띄우므로 여기서는 실행하지 않고 선택된 backend만 보고합니다.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(),
        version=__version__,
        browser_backend=provider.name,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "상품 검색 추출 서비스",
        "version": __version__,
        "docs": "/docs"
    }
