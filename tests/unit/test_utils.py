"""URL/텍스트 유틸 테스트"""
import pytest

from product_search.utils import clean_text, normalize_href

BASE = "https://www.amazon.in/"


class TestNormalizeHref:
    """썸네일 href 정규화 테스트"""

    def test_protocol_relative(self):
        assert normalize_href("//m.media-amazon.com/images/I/a.jpg", BASE) == "https://m.media-amazon.com/images/I/a.jpg"

    def test_root_relative(self):
        assert normalize_href("/images/a.jpg", BASE) == "https://www.amazon.in/images/a.jpg"

    def test_absolute_unchanged(self):
        url = "https://m.media-amazon.com/images/I/b.jpg"
        assert normalize_href(url, BASE) == url

    @pytest.mark.parametrize("href", ["", "   ", None])
    def test_empty(self, href):
        assert normalize_href(href, BASE) == ""

    def test_data_uri_rejected(self):
        """placeholder 이미지는 URL로 취급하지 않음"""
        assert normalize_href("data:image/gif;base64,R0lGOD", BASE) == ""


class TestCleanText:
    def test_collapses_whitespace(self):
        assert clean_text("  boAt Airdopes\n   141  ") == "boAt Airdopes 141"

    def test_empty(self):
        assert clean_text("") == ""
        assert clean_text(None) == ""
