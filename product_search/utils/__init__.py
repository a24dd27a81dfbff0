"""Utilities package - Flat structure"""

from .url_utils import normalize_href
from .text_utils import clean_text

__all__ = [
    "normalize_href",
    "clean_text",
]
