"""Crawler Result Standard Format

검색 결과 카드 한 개에서 추출한 상품 레코드의 표준 형식을 정의합니다.
"""

from dataclasses import dataclass
from typing import Any, Dict


# 필드를 추출하지 못했을 때 사용하는 sentinel 값
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class ProductRecord:
    """검색 결과 카드 추출 결과

    title 은 항상 비어 있지 않으며, 나머지 필드는 비어 있지 않은 문자열이거나
    NOT_AVAILABLE 입니다 (None 없음).

    Attributes:
        title: 상품명
        price: 통화 기호가 붙은 가격 문자열 (예: "₹1,299.99")
        review_count: 리뷰 수 (스크랩한 문자열 그대로)
        star_rating: 별점 라벨 (예: "4.3 out of 5 stars")
        image_url: 썸네일 절대 URL
    """

    title: str
    price: str = NOT_AVAILABLE
    review_count: str = NOT_AVAILABLE
    star_rating: str = NOT_AVAILABLE
    image_url: str = NOT_AVAILABLE

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("ProductRecord.title must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        """API 응답용 딕셔너리 (wire 필드명 사용)"""
        return {
            "title": self.title,
            "price": self.price,
            "reviewCount": self.review_count,
            "starRating": self.star_rating,
            "imageUrl": self.image_url,
        }
