"""Crawler modules (Playwright + selectolax).

공개 API는 이 파일에서만 export합니다.
"""

from .result import NOT_AVAILABLE, ProductRecord
from .parsing import compose_price, parse_search_results
from .search_extractor import SearchExtractor
from .probe import PageProbe

__all__ = [
        "NOT_AVAILABLE",
        "ProductRecord",
        "compose_price",
        "parse_search_results",
        "SearchExtractor",
        "PageProbe",
]
