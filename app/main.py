"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Validates the entity-column mappings at startup, then serves the board
pages, the posts API, OAuth2 login and the order example.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import Base
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.middleware.security import SecurityMiddleware
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.schema import validate_schema_mappings

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """기동 시 엔티티-컬럼 매핑을 검증합니다 (Abort startup on mapping drift)."""
    validate_schema_mappings(Base.metadata)
    yield


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# 접근 제어 미들웨어 — 가장 안쪽에서 라우터 직전에 실행 (Innermost, runs right before routing)
app.add_middleware(SecurityMiddleware)

# 요청 로깅 미들웨어 — 접근 제어 결과(302/403)까지 기록 (Also records 302/403 decisions)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from app.api.auth import router as auth_router  # noqa: E402
from app.api.hello import router as hello_router  # noqa: E402
from app.api.index import router as index_router  # noqa: E402
from app.api.orders import router as orders_router  # noqa: E402
from app.api.posts import router as posts_router  # noqa: E402

app.include_router(index_router, tags=["Pages"])
app.include_router(auth_router, tags=["Auth"])
app.include_router(hello_router, tags=["Hello"])
app.include_router(posts_router, prefix="/api/v1/posts", tags=["Posts"])
app.include_router(orders_router, tags=["Orders"])
