"""설정 검증 / 입력 검증 / 예외 계층 테스트"""
import pytest
from pydantic import ValidationError

from product_search.core.config import Settings
from product_search.core.exceptions import (
    ExtractionException,
    InvalidQueryException,
    NavigationTimeoutException,
    NoResultsFoundException,
    ProductSearchException,
    ResourceCleanupException,
    SearchControlNotFoundException,
)
from product_search.core.logging import sanitize_for_log
from product_search.core.security import SecurityValidator


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.target_url == "https://www.amazon.in/"
        assert s.search_input_selector == "#twotabsearchtextbox"
        assert s.wait_until == "networkidle"
        assert s.extract_timeout_s > 0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("navigation_timeout_ms", 0),
            ("extract_timeout_s", -1),
            ("browser_backend", "firefox-grid"),
            ("wait_until", "idle"),
            ("target_url", "ftp://example.com"),
            ("cache_max_age_s", -5),
        ],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_env_vars_loaded_case_insensitively(self, monkeypatch):
        monkeypatch.setenv("probe_url", "https://example.org")
        monkeypatch.setenv("EXTRACT_TIMEOUT_S", "45")
        s = Settings(_env_file=None)
        assert s.probe_url == "https://example.org"
        assert s.extract_timeout_s == 45.0

    def test_launch_timeout_must_fit_inside_extract_timeout(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, browser_launch_timeout_s=60.0, extract_timeout_s=60.0)

    def test_backend_normalized(self):
        assert Settings(_env_file=None, browser_backend=" Remote ").browser_backend == "remote"


class TestSecurityValidator:
    def test_query_stripped(self):
        assert SecurityValidator.validate_query("  iphone 15 ") == "iphone 15"

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_blank_query(self, query):
        with pytest.raises(InvalidQueryException) as exc_info:
            SecurityValidator.validate_query(query)
        assert exc_info.value.error_code == "INVALID_QUERY"

    def test_control_characters_rejected(self):
        with pytest.raises(InvalidQueryException):
            SecurityValidator.validate_query("iphone\x00")

    def test_quotes_allowed(self):
        assert SecurityValidator.validate_query('32" monitor') == '32" monitor'


class TestExceptionHierarchy:
    def test_extraction_errors_share_base(self):
        for exc in (
            NavigationTimeoutException("goto", 1000),
            SearchControlNotFoundException("#q"),
            NoResultsFoundException("q"),
        ):
            assert isinstance(exc, ExtractionException)
            assert isinstance(exc, ProductSearchException)

    def test_str_includes_code(self):
        exc = SearchControlNotFoundException("#twotabsearchtextbox")
        assert str(exc) == "[SEARCH_CONTROL_NOT_FOUND] Search control not found: #twotabsearchtextbox"

    def test_cleanup_error_is_not_extraction_error(self):
        assert not isinstance(ResourceCleanupException("browser", "x"), ExtractionException)


def test_sanitize_for_log():
    assert sanitize_for_log("") == "[empty]"
    assert sanitize_for_log("a\nb") == "a b"
    assert sanitize_for_log("x" * 10, max_length=5) == "xxxxx..."
