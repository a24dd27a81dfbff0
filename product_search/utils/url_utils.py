"""URL 정규화 유틸리티"""
from urllib.parse import urljoin, urlparse


def normalize_href(href: str, base_url: str) -> str:
    """상대/프로토콜-상대 href를 절대 URL로 정규화합니다.

    - "//host/path" -> "https://host/path"
    - "/path" -> base_url 기준 절대 경로
    - "http(s)://..." -> 그대로
    - "data:" 등 http(s)가 아닌 스킴 -> "" (썸네일 placeholder 제외)

    Examples:
        >>> normalize_href("//m.media-amazon.com/images/I/a.jpg", "https://www.amazon.in/")
        'https://m.media-amazon.com/images/I/a.jpg'
        >>> normalize_href("/images/a.jpg", "https://www.amazon.in/")
        'https://www.amazon.in/images/a.jpg'
    """
    if not href:
        return ""

    h = href.strip()
    if not h:
        return ""

    if h.startswith("//"):
        return f"https:{h}"

    absolute = urljoin(base_url, h)
    if urlparse(absolute).scheme not in ("http", "https"):
        return ""

    return absolute
