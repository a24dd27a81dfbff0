"""입력 검증 함수"""

from typing import Optional

from fastapi import Request

from product_search.core.config import settings
from product_search.core.exceptions import InvalidQueryException
from product_search.core.logging import logger, sanitize_for_log


class SecurityValidator:
    """입력 보안 검증"""

    # 검색창에 입력될 수 없는 제어 문자
    FORBIDDEN_CHARS = ['\0', '\n', '\r', '\t']

    @staticmethod
    def validate_query(query: Optional[str], max_length: Optional[int] = None) -> str:
        """검색어 검증

        공백만으로 이루어진 검색어는 브라우저 작업 전에 거부합니다.

        Args:
            query: 검색어
            max_length: 최대 길이 (기본값: settings.max_query_length)

        Returns:
            앞뒤 공백이 제거된 검색어

        Raises:
            InvalidQueryException: 유효하지 않은 입력
        """
        if query is None or not query.strip():
            raise InvalidQueryException("No query provided")

        limit = max_length or settings.max_query_length
        cleaned = query.strip()
        if len(cleaned) > limit:
            raise InvalidQueryException(f"Query must be at most {limit} characters")

        for char in SecurityValidator.FORBIDDEN_CHARS:
            if char in cleaned:
                logger.warning(f"[Security] Control character in query: {sanitize_for_log(cleaned)}")
                raise InvalidQueryException("Query contains control characters")

        return cleaned


async def log_request(request: Request) -> None:
    """요청 로깅 (쿼리 파라미터는 정리 후 기록)"""
    query_params = {
        key: sanitize_for_log(str(value), max_length=50)
        for key, value in request.query_params.items()
    }

    if query_params:
        logger.debug(f"{request.method} {request.url.path}?{query_params}")
    else:
        logger.debug(f"{request.method} {request.url.path}")
