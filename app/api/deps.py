"""FastAPI 의존성 주입 모듈 — 세션 주체 조회.

FastAPI dependency injection module — Session principal lookup.
SecurityMiddleware has already decoded the session cookie and applied the
access rules; these dependencies only expose the result to handlers.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.models.user import Role
from app.schemas.auth import SessionUser
from app.utils.exceptions import ForbiddenError, UnauthorizedError


def get_login_user(request: Request) -> SessionUser | None:
    """현재 요청의 세션 주체를 반환합니다. 비로그인 시 None.

    Return the principal attached by SecurityMiddleware, or None for an
    anonymous request.
    """
    return getattr(request.state, "user", None)


def get_current_user(
    user: Annotated[SessionUser | None, Depends(get_login_user)],
) -> SessionUser:
    """인증된 주체를 반환합니다.

    Raises:
        UnauthorizedError(401): 세션이 없을 때 (No session principal)
    """
    if user is None:
        raise UnauthorizedError()
    return user


def require_role(role: Role):
    """역할 검사 의존성 팩토리.

    Dependency factory enforcing a role on top of the path rules.

    Args:
        role: 필요한 역할 (Required role)

    Returns:
        FastAPI 의존성 함수 — 주체 반환 또는 403 발생
    """
    def _check(
        current_user: Annotated[SessionUser, Depends(get_current_user)],
    ) -> SessionUser:
        if not current_user.has_role(role):
            raise ForbiddenError()
        return current_user
    return _check


# 편의 의존성 — Pre-configured role dependency
require_user = require_role(Role.USER)
