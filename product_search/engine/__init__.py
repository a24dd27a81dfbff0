"""Engine Layer - 검색 추출 오케스트레이션"""

from .orchestrator import SearchOrchestrator, status_for_exception
from .result import ExtractionOutcome, ExtractionStatus

__all__ = [
    "SearchOrchestrator",
    "status_for_exception",
    "ExtractionOutcome",
    "ExtractionStatus",
]
