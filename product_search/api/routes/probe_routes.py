"""페이지 프로브 엔드포인트 (브라우저 동작 진단용)

대상은 항상 settings.probe_url 입니다. 요청 파라미터로 URL을 받지 않습니다.
"""

import asyncio

from fastapi import APIRouter, Depends, Response

from product_search.core.config import settings
from product_search.core.exceptions import ProductSearchException
from product_search.core.logging import logger
from product_search.crawlers import PageProbe
from product_search.schemas.product_schema import PageHeadingResponse, PageTitleResponse

from .dependencies import get_page_probe

router = APIRouter(prefix="/api", tags=["probe"])


async def _run_probe(probe_call):
    """프로브 실행 → (값, 상태코드)"""
    try:
        value = await asyncio.wait_for(probe_call(), timeout=settings.extract_timeout_s)
        return value, 200
    except asyncio.TimeoutError:
        logger.error(f"[API] Probe timeout after {settings.extract_timeout_s}s")
    except ProductSearchException as e:
        logger.error(f"[API] Probe failed: {e}")
    except Exception as e:
        logger.error(f"[API] Probe unexpected error: {type(e).__name__}: {e}", exc_info=True)
    return None, 500


@router.get("/scrape", response_model=PageTitleResponse, response_model_exclude_none=True)
async def scrape_page_title(
    response: Response,
    probe: PageProbe = Depends(get_page_probe),
):
    """페이지 제목 프로브"""
    title, status = await _run_probe(probe.fetch_title)
    response.status_code = status
    if status == 200:
        return PageTitleResponse(success=True, title=title, status=status)
    return PageTitleResponse(success=False, error="Failed to scrape the page.", status=status)


@router.get("/parse", response_model=PageHeadingResponse, response_model_exclude_none=True)
async def parse_page_heading(
    response: Response,
    probe: PageProbe = Depends(get_page_probe),
):
    """페이지 h1 프로브"""
    heading, status = await _run_probe(probe.fetch_heading)
    response.status_code = status
    if status == 200:
        return PageHeadingResponse(success=True, heading=heading, status=status)
    return PageHeadingResponse(success=False, error="Failed to parse the page.", status=status)
