"""Pydantic 스키마 정의"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from product_search.crawlers.result import ProductRecord


class ProductItem(BaseModel):
    """검색 결과 카드 한 개 (wire 필드명은 camelCase)"""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, description="상품명")
    price: str = Field(..., description="가격 문자열 또는 N/A")
    review_count: str = Field(..., alias="reviewCount", description="리뷰 수 또는 N/A")
    star_rating: str = Field(..., alias="starRating", description="별점 라벨 또는 N/A")
    image_url: str = Field(..., alias="imageUrl", description="썸네일 URL 또는 N/A")

    @classmethod
    def from_record(cls, record: ProductRecord) -> "ProductItem":
        return cls.model_validate(record.to_dict())


class ProductSearchResponse(BaseModel):
    """상품 검색 응답 (products/error 는 해당 없을 때 생략)"""
    success: bool = Field(..., description="성공 여부")
    products: Optional[List[ProductItem]] = Field(None, description="추출된 상품")
    error: Optional[str] = Field(None, description="오류 메시지 (실패 시)")
    status: int = Field(..., description="HTTP 상태 코드와 동일")


class PageTitleResponse(BaseModel):
    """페이지 제목 프로브 응답"""
    success: bool
    title: Optional[str] = None
    error: Optional[str] = None
    status: int


class PageHeadingResponse(BaseModel):
    """페이지 h1 프로브 응답"""
    success: bool
    heading: Optional[str] = None
    error: Optional[str] = None
    status: int


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    browser_backend: str
