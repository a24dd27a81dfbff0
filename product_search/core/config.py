"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator


_ALLOWED_BACKENDS = ("auto", "local", "serverless", "remote")
_ALLOWED_WAIT_UNTIL = ("load", "domcontentloaded", "networkidle", "commit")


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # 대상 사이트
    target_url: str = "https://www.amazon.in/"
    search_input_selector: str = "#twotabsearchtextbox"

    # 브라우저 식별 (봇 차단 완화용 정적 UA)
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/85.0.4183.102 Safari/537.36"
    )
    locale: str = "en-IN"
    accept_language: str = "en-IN,en;q=0.9"

    # 이미지/스타일시트/폰트 차단 (성능 힌트일 뿐, 추출 결과에는 영향 없음)
    block_resources: bool = True

    # 네비게이션 대기 조건 및 타임아웃
    # NOTE: networkidle 은 상한이 있는 휴리스틱이라 별도 ms 상한을 함께 둡니다.
    wait_until: str = "networkidle"
    navigation_timeout_ms: int = 30000
    search_control_timeout_ms: int = 10000
    browser_launch_timeout_s: float = 30.0

    # 전체 추출 작업 하드 캡 (사이트가 응답하지 않아도 요청이 매달리지 않도록)
    extract_timeout_s: float = 60.0

    # 브라우저 공급 방식: auto | local | serverless | remote
    # auto: AWS_REGION / VERCEL 환경 변수가 있으면 serverless, 아니면 local
    browser_backend: str = "auto"
    chromium_executable_path: str = ""
    browser_ws_endpoint: str = ""

    # 진단용 페이지 프로브 기본 URL
    probe_url: str = "https://example.com"

    # 입력 제한
    max_query_length: int = 200

    # HTTP 캐시 힌트 (서버 측 캐시는 없음)
    cache_max_age_s: int = 60
    cache_stale_while_revalidate_s: int = 30

    # API
    api_title: str = "상품 검색 추출 서비스"
    api_version: str = "1.0.0"
    api_description: str = "Headless 브라우저로 검색 결과 카드를 추출합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator(
        "navigation_timeout_ms",
        "search_control_timeout_ms",
        "max_query_length",
    )
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeouts and limits must be positive")
        return v

    @field_validator("browser_launch_timeout_s", "extract_timeout_s")
    @classmethod
    def validate_positive_seconds(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("cache_max_age_s", "cache_stale_while_revalidate_s")
    @classmethod
    def validate_cache_hints(cls, v: int) -> int:
        if v < 0:
            raise ValueError("cache hints must be >= 0")
        return v

    @field_validator("browser_backend")
    @classmethod
    def validate_browser_backend(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in _ALLOWED_BACKENDS:
            raise ValueError(f"browser_backend must be one of {_ALLOWED_BACKENDS}")
        return v

    @field_validator("wait_until")
    @classmethod
    def validate_wait_until(cls, v: str) -> str:
        if v not in _ALLOWED_WAIT_UNTIL:
            raise ValueError(f"wait_until must be one of {_ALLOWED_WAIT_UNTIL}")
        return v

    @field_validator("target_url", "probe_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v

    @model_validator(mode="after")
    def validate_launch_within_extract(self) -> "Settings":
        # 브라우저 실행 마감은 전체 추출 하드 캡보다 짧아야 함
        if self.browser_launch_timeout_s >= self.extract_timeout_s:
            raise ValueError("browser_launch_timeout_s must be less than extract_timeout_s")
        return self


settings = Settings()
