"""Extraction Outcome - Standardized Result Format

추출 작업의 성공/실패를 예외가 아닌 값으로 표현합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from product_search.crawlers.result import ProductRecord


class ExtractionStatus(str, Enum):
    """추출 상태"""

    SUCCESS = "success"
    INVALID_QUERY = "invalid_query"  # 빈 검색어 (브라우저 미실행)
    NO_RESULTS = "no_results"  # 결과 0건 (정상적인 부정 결과)
    NAVIGATION_FAILED = "navigation_failed"  # 사이트 접속 실패
    NAVIGATION_TIMEOUT = "navigation_timeout"  # 네비게이션 대기 타임아웃
    SEARCH_CONTROL_NOT_FOUND = "search_control_not_found"  # 마크업 변경 (셀렉터 드리프트)
    BROWSER_ERROR = "browser_error"  # 브라우저 실행 실패
    PARSE_ERROR = "parse_error"  # HTML 캡처/파싱 실패
    TIMEOUT = "timeout"  # 전체 작업 하드 캡 초과
    INTERNAL_ERROR = "internal_error"  # 분류되지 않은 오류


_HTTP_STATUS = {
    ExtractionStatus.SUCCESS: 200,
    ExtractionStatus.INVALID_QUERY: 400,
    ExtractionStatus.NO_RESULTS: 404,
}


@dataclass
class ExtractionOutcome:
    """추출 결과 표준 포맷

    Attributes:
        status: 추출 상태
        products: 추출된 상품 (성공 시에만 비어 있지 않음)
        query: 검색어
        elapsed_ms: 소요 시간 (밀리초)
        error_message: 오류 메시지 (내부 로깅용, 클라이언트에 그대로 노출하지 않음)
        error_code: 예외의 error_code
    """

    status: ExtractionStatus
    products: List[ProductRecord] = field(default_factory=list)
    query: Optional[str] = None
    elapsed_ms: Optional[float] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == ExtractionStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """하드 실패 여부 (INVALID_QUERY / NO_RESULTS 는 실패가 아님)"""
        return self.status not in (
            ExtractionStatus.SUCCESS,
            ExtractionStatus.INVALID_QUERY,
            ExtractionStatus.NO_RESULTS,
        )

    @property
    def http_status(self) -> int:
        """200 / 400 / 404 / 500"""
        return _HTTP_STATUS.get(self.status, 500)

    @classmethod
    def success(cls, products: List[ProductRecord], query: str, elapsed_ms: float) -> "ExtractionOutcome":
        return cls(
            status=ExtractionStatus.SUCCESS,
            products=list(products),
            query=query,
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def invalid_query(cls, query: Optional[str], reason: str) -> "ExtractionOutcome":
        return cls(
            status=ExtractionStatus.INVALID_QUERY,
            query=query,
            elapsed_ms=0.0,
            error_message=reason,
            error_code="INVALID_QUERY",
        )

    @classmethod
    def no_results(cls, query: str, elapsed_ms: float) -> "ExtractionOutcome":
        return cls(
            status=ExtractionStatus.NO_RESULTS,
            query=query,
            elapsed_ms=elapsed_ms,
            error_message="No products found",
            error_code="NO_RESULTS",
        )

    @classmethod
    def failure(
        cls,
        status: ExtractionStatus,
        query: str,
        elapsed_ms: float,
        error: str,
        error_code: Optional[str] = None,
    ) -> "ExtractionOutcome":
        """하드 실패 결과 생성

        Args:
            status: 실패 상태
            query: 검색어
            elapsed_ms: 소요 시간 (밀리초)
            error: 오류 메시지
            error_code: 예외의 error_code (없으면 status 값)
        """
        return cls(
            status=status,
            query=query,
            elapsed_ms=elapsed_ms,
            error_message=error,
            error_code=error_code or status.value.upper(),
        )
