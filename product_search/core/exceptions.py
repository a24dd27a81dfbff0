"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class ProductSearchException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 추출(브라우저 자동화) 관련 예외
class ExtractionException(ProductSearchException):
    """추출 과정 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "EXTRACTION_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "EXTRACTION_ERROR", details)


class BrowserException(ExtractionException):
    """브라우저 실행/연결 오류"""
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "BROWSER_ERROR", details)


class NavigationFailedException(ExtractionException):
    """대상 사이트 접속 실패 (DNS, 연결 거부, net::ERR_* 등)"""
    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Navigation to {url} failed: {reason}"
        super().__init__(message, "NAVIGATION_FAILED",
                        details or {"url": url, "reason": reason})


class NavigationTimeoutException(ExtractionException):
    """네비게이션 대기(networkidle 등) 타임아웃"""
    def __init__(self, operation: str, timeout_ms: int, details: Optional[dict[str, Any]] = None):
        message = f"Navigation timeout during '{operation}' after {timeout_ms}ms"
        super().__init__(message, "NAVIGATION_TIMEOUT",
                        details or {"operation": operation, "timeout_ms": timeout_ms})


class SearchControlNotFoundException(ExtractionException):
    """검색 입력창을 찾지 못함 - 대상 사이트 마크업 변경 신호"""
    def __init__(self, selector: str, details: Optional[dict[str, Any]] = None):
        message = f"Search control not found: {selector}"
        super().__init__(message, "SEARCH_CONTROL_NOT_FOUND",
                        details or {"selector": selector})


class ParsingException(ExtractionException):
    """HTML 파싱 오류"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to parse response: {reason}"
        super().__init__(message, "PARSING_ERROR", details or {"reason": reason})


class NoResultsFoundException(ExtractionException):
    """검색 결과 0건 (정상적인 부정 결과, 결함 아님)"""
    def __init__(self, query: str, details: Optional[dict[str, Any]] = None):
        message = f"No products found for query: {query}"
        super().__init__(message, "NO_RESULTS", details or {"query": query})


# 리소스 정리 예외 (로그 전용 - 원래 결과/에러를 덮어쓰지 않음)
class ResourceCleanupException(ProductSearchException):
    """브라우저 종료 실패"""
    def __init__(self, resource: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to release {resource}: {reason}"
        super().__init__(message, "RESOURCE_CLEANUP_FAILED",
                        details or {"resource": resource, "reason": reason})


# 유효성 검증 관련 예외
class ValidationException(ProductSearchException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("query", reason, details)
        self.error_code = "INVALID_QUERY"


# 시간 관련 예외
class TimeoutException(ProductSearchException):
    """전체 작업 타임아웃"""
    def __init__(self, operation: str, timeout_s: float, details: Optional[dict[str, Any]] = None):
        message = f"Operation '{operation}' timed out after {timeout_s}s"
        super().__init__(message, "TIMEOUT",
                        details or {"operation": operation, "timeout_s": timeout_s})
