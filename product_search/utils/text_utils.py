"""텍스트 정리 유틸리티"""
import re


_WHITESPACE = re.compile(r"\s+")


def clean_text(text: str | None) -> str:
    """스크랩한 텍스트의 과도한 공백/줄바꿈을 하나의 공백으로 정리합니다."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()
