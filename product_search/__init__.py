"""상품 검색 추출 서비스 (Headless Browser + HTML Extraction)"""

__version__ = "1.0.0"
