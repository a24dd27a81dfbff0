"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 브라우저/설정 주입

금지:
- 실제 브라우저 실행
- 외부 네트워크 호출
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from product_search.core.config import Settings  # noqa: E402
from tests.fixtures import FakePage, FakeProvider, SEARCH_RESULTS_PAGE  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def test_settings() -> Settings:
    """테스트용 설정 (짧은 타임아웃, 환경 변수 영향 없음)"""
    return Settings(
        _env_file=None,
        target_url="https://www.amazon.in/",
        navigation_timeout_ms=5000,
        search_control_timeout_ms=2000,
        browser_launch_timeout_s=2.0,
        extract_timeout_s=5.0,
        browser_backend="local",
    )


@pytest.fixture
def results_page() -> FakePage:
    return FakePage(SEARCH_RESULTS_PAGE)


@pytest.fixture
def fake_provider(results_page: FakePage) -> FakeProvider:
    return FakeProvider(results_page)
