"""검색 결과 HTML 파싱/추출 유틸.

이 모듈은 브라우저(fetch)와 분리된 순수 파싱 로직을 담습니다.
HTML 스냅샷이 같으면 결과도 항상 같습니다.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from selectolax.lexbor import LexborHTMLParser, LexborNode

from product_search.core.exceptions import ParsingException
from product_search.core.logging import logger
from product_search.crawlers.result import NOT_AVAILABLE, ProductRecord
from product_search.utils.text_utils import clean_text
from product_search.utils.url_utils import normalize_href


CURRENCY_SYMBOL = "₹"

# 결과 카드 / 필드별 셀렉터 (대상 사이트 마크업에 고정)
CARD_SELECTOR = ".s-main-slot .s-result-item"
TITLE_SELECTORS = ("h2 a span", "h2 span")
PRICE_WHOLE_SELECTOR = ".a-price-whole"
PRICE_FRACTION_SELECTOR = ".a-price-fraction"
REVIEW_COUNT_SELECTOR = ".a-size-base.s-underline-text"
STAR_RATING_SELECTOR = ".a-icon-alt"
IMAGE_SELECTOR = ".s-image"


def compose_price(whole: Optional[str], fraction: Optional[str]) -> str:
    """정수부/소수부 조각으로 가격 문자열을 만듭니다.

    숫자로 변환하지 않는 표시용 포맷입니다.

    - ("1,299", "99") -> "₹1,299.99"
    - ("499", None) -> "₹499.00"
    - (None, ...) -> NOT_AVAILABLE

    정수부 마크업 안에 들어 있는 소수점("1,299.")은 제거합니다.
    """
    whole_part = clean_text(whole).rstrip(".").strip()
    if not whole_part:
        return NOT_AVAILABLE

    fraction_part = clean_text(fraction).lstrip(".").strip()
    return f"{CURRENCY_SYMBOL}{whole_part}.{fraction_part or '00'}"


def _first_text(card: LexborNode, selector: str) -> str:
    node = card.css_first(selector)
    if node is None:
        return ""
    return clean_text(node.text())


def _or_sentinel(value: str) -> str:
    return value if value else NOT_AVAILABLE


def extract_title(card: LexborNode) -> str:
    for selector in TITLE_SELECTORS:
        title = _first_text(card, selector)
        if title:
            return title
    return ""


def extract_price(card: LexborNode) -> str:
    whole = _first_text(card, PRICE_WHOLE_SELECTOR)
    fraction = _first_text(card, PRICE_FRACTION_SELECTOR)
    return compose_price(whole, fraction)


def extract_review_count(card: LexborNode) -> str:
    return _or_sentinel(_first_text(card, REVIEW_COUNT_SELECTOR))


def extract_star_rating(card: LexborNode) -> str:
    return _or_sentinel(_first_text(card, STAR_RATING_SELECTOR))


def extract_image_url(card: LexborNode, base_url: str) -> str:
    node = card.css_first(IMAGE_SELECTOR)
    if node is None:
        return NOT_AVAILABLE
    src = node.attributes.get("src") or ""
    return _or_sentinel(normalize_href(src, base_url))


def _safe_field(extract: Callable[[], str], field: str) -> str:
    """필드 하나의 추출 실패가 같은 카드의 다른 필드에 번지지 않도록 격리"""
    try:
        return extract()
    except Exception as e:
        logger.debug(f"[Parser] Field '{field}' extraction failed: {type(e).__name__}: {e}")
        return NOT_AVAILABLE


def parse_card(card: LexborNode, base_url: str) -> Optional[ProductRecord]:
    """결과 카드 하나를 ProductRecord로 변환. 제목이 없으면 None."""
    try:
        title = extract_title(card)
    except Exception as e:
        logger.debug(f"[Parser] Title extraction failed: {type(e).__name__}: {e}")
        return None

    if not title:
        return None

    return ProductRecord(
        title=title,
        price=_safe_field(lambda: extract_price(card), "price"),
        review_count=_safe_field(lambda: extract_review_count(card), "review_count"),
        star_rating=_safe_field(lambda: extract_star_rating(card), "star_rating"),
        image_url=_safe_field(lambda: extract_image_url(card, base_url), "image_url"),
    )


def parse_search_results(html: str, base_url: str) -> List[ProductRecord]:
    """검색 결과 HTML에서 상품 레코드를 카드 순서대로 추출합니다.

    Args:
        html: 렌더링이 끝난 검색 결과 페이지 HTML
        base_url: 상대 이미지 경로를 절대 URL로 바꿀 기준 URL

    Returns:
        제목이 있는 카드들의 ProductRecord 리스트 (빈 리스트 가능)

    Raises:
        ParsingException: HTML을 문서 트리로 파싱하지 못한 경우
    """
    if html is None:
        raise ParsingException("page content is empty")

    try:
        parser = LexborHTMLParser(html)
        cards = parser.css(CARD_SELECTOR)
    except Exception as e:
        raise ParsingException(f"{type(e).__name__}: {e}") from e

    products: List[ProductRecord] = []
    for card in cards:
        record = parse_card(card, base_url)
        if record is not None:
            products.append(record)

    logger.debug(f"[Parser] cards={len(cards)} products={len(products)}")
    return products


def parse_first_heading(html: str) -> str:
    """문서의 첫 번째 h1 텍스트 (없으면 빈 문자열)"""
    try:
        parser = LexborHTMLParser(html or "")
        node = parser.css_first("h1")
    except Exception as e:
        raise ParsingException(f"{type(e).__name__}: {e}") from e
    return clean_text(node.text()) if node is not None else ""
