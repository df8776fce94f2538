"""요청 로깅 미들웨어 — Axiom 전송 및 로컬 로그.

Request logging middleware.
Builds one structured event per request (method, path, query, masked body,
status, duration, error detail). The event is ingested into Axiom when
AXIOM_API_TOKEN and AXIOM_DATASET are configured, and written to the
module logger otherwise.
Sensitive fields (session, token, secret, code, state) are masked.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 — OAuth2 code/state도 포함
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|session|cookie|code|state|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — 정적 리소스 및 문서 (Static assets and docs are not logged)
_SKIP_PREFIXES: tuple[str, ...] = ("/health", "/docs", "/redoc", "/openapi.json", "/css/", "/js/", "/images/")


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask(item, depth + 1) for item in data[:20]]
    if isinstance(data, str) and len(data) > 2000:
        return data[:2000] + "...(truncated)"
    return data


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 요청/응답을 구조화된 이벤트로 기록하는 미들웨어.

    Middleware that records every request as a structured event.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path: str = request.url.path
        if path.startswith(_SKIP_PREFIXES):
            return await call_next(request)

        start_time = time.perf_counter()
        event: dict[str, Any] = {"method": request.method, "path": path}
        if request.query_params:
            event["query_params"] = _mask(dict(request.query_params))

        # JSON 본문만 기록 (Only JSON bodies are recorded)
        if request.method in ("POST", "PUT", "PATCH"):
            body_bytes: bytes = await request.body()
            if body_bytes:
                try:
                    event["request_body"] = _mask(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    event["request_body"] = "(non-json body)"

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            self._emit(event)

    def _emit(self, event: dict[str, Any]) -> None:
        if self._client is None:
            logger.info("%s %s %s %.2fms", event["method"], event["path"], event["status_code"], event["duration_ms"])
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception as e:
            # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure
            logger.warning("Axiom ingest failed: %r", e)
