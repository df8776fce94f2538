"""접근 제어 미들웨어.

Access-control middleware.
Resolves the session principal from the session cookie, stores it on
``request.state.user`` and applies ``authorize()`` before any router runs.
    REDIRECT → 302 로그인 페이지 (redirect to the login page)
    DENY     → 403 JSON 응답 (403 with a JSON detail)
"""

import logging
from typing import Any, Sequence

from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings
from app.schemas.auth import SessionUser
from app.security.access import DEFAULT_RULES, LOGIN_PAGE_URL, AccessDecision, AccessRule, authorize
from app.utils.jwt import read_session_token

logger = logging.getLogger(__name__)


class SecurityMiddleware(BaseHTTPMiddleware):
    """경로/역할 기반 접근 제어 미들웨어.

    Middleware enforcing the ordered access rules on every request.
    """

    def __init__(self, app: Any, rules: Sequence[AccessRule] = DEFAULT_RULES) -> None:
        super().__init__(app)
        self._rules: Sequence[AccessRule] = rules

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        principal: SessionUser | None = read_session_token(
            request.cookies.get(settings.SESSION_COOKIE_NAME)
        )
        request.state.user = principal

        decision: AccessDecision = authorize(request.url.path, principal, self._rules)
        if decision == AccessDecision.REDIRECT:
            return RedirectResponse(LOGIN_PAGE_URL, status_code=status.HTTP_302_FOUND)
        if decision == AccessDecision.DENY:
            logger.warning(
                "Access denied: path=%s user_id=%s role=%s",
                request.url.path, principal.id, principal.role.value,
            )
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content={"detail": "Insufficient permissions"},
            )
        return await call_next(request)
