"""애플리케이션 환경 설정 모듈.

Application configuration module using pydantic-settings.
All settings can be overridden via environment variables or a .env file.
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

# .env 파일 절대 경로 — CWD와 무관하게 항상 프로젝트 루트의 .env를 참조
# Absolute path to .env file — ensures correct loading regardless of CWD
_ENV_FILE: Path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    """애플리케이션 전역 설정 — 환경 변수 기반 구성.

    Global application settings loaded from environment variables.
    Uses pydantic-settings for automatic env var parsing and .env file support.

    Attributes:
        DATABASE_URL: 비동기 DB 연결 문자열 (Async database connection string)
        SESSION_SECRET_KEY: 세션 쿠키 JWT 서명 비밀키 (Session cookie signing key)
        SESSION_ALGORITHM: 세션 JWT 서명 알고리즘 (Session JWT algorithm)
        SESSION_EXPIRE_MINUTES: 세션 만료 시간(분) (Session TTL in minutes)
        SESSION_COOKIE_NAME: 세션 쿠키 이름 (Session cookie name)
        GOOGLE_CLIENT_ID: 구글 OAuth2 클라이언트 ID (Google OAuth2 client id)
        NAVER_CLIENT_ID: 네이버 OAuth2 클라이언트 ID (Naver OAuth2 client id)
        CORS_ORIGINS: 허용된 CORS 출처 목록 (Allowed CORS origin URLs)
        APP_NAME: 애플리케이션 표시 이름 (Application display name)
        DEBUG: 디버그 모드 플래그 (Debug mode flag, enables SQL echo)
    """

    # 데이터베이스 — 로컬 개발용 SQLite (aiosqlite), 운영은 postgresql+asyncpg
    DATABASE_URL: str = "sqlite+aiosqlite:///./webservice.db"

    # 세션 설정 — OAuth2 로그인 후 발급되는 세션 쿠키 (Signed session cookie)
    SESSION_SECRET_KEY: str = "change-this-secret-key-in-production"  # 운영 환경에서 반드시 변경 (MUST change in production)
    SESSION_ALGORITHM: str = "HS256"
    SESSION_EXPIRE_MINUTES: int = 60 * 24  # 세션 유효 기간: 1일 (Session TTL)
    SESSION_COOKIE_NAME: str = "SESSION"

    # OAuth2 클라이언트 설정 — External identity providers
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    NAVER_CLIENT_ID: str = ""
    NAVER_CLIENT_SECRET: str = ""
    # 콜백 URL 기본 주소 — {base}/login/oauth2/code/{registration_id}
    OAUTH2_REDIRECT_BASE_URL: str = "http://localhost:8080"

    # CORS 설정 — 프론트엔드 개발 서버 허용 (Frontend dev server origins)
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080"]

    # 앱 메타데이터 — Application metadata
    APP_NAME: str = "Springboot Webservice"
    DEBUG: bool = False  # True이면 SQLAlchemy SQL 로그 출력 (Enables SQL echo when True)

    # Axiom 로깅 설정 — Axiom observability platform settings
    AXIOM_API_TOKEN: str = ""  # Axiom API 토큰 (API token from Axiom dashboard)
    AXIOM_DATASET: str = ""  # Axiom 데이터셋 이름 (Dataset name for API logs)

    # 주문 예제 저장소 지연 — Simulated latency of the order demo repository (seconds)
    ORDER_REPOSITORY_DELAY_SECONDS: float = 0.0

    model_config = {"env_file": _ENV_FILE, "env_file_encoding": "utf-8"}


# 전역 설정 싱글턴 인스턴스 — Global settings singleton instance
settings: Settings = Settings()
