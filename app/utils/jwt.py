"""세션 토큰 생성 및 검증 유틸리티 모듈.

Session token creation and verification utility module.
After a successful OAuth2 login the principal is stored client-side in a
signed JWT cookie; every request decodes it back into a SessionUser.

JWT Payload Structure:
    {
        "sub": "1",                   # 사용자 ID (User identifier)
        "name": "홍길동",              # 이름 (Display name)
        "email": "user@example.com",  # 이메일 (Email)
        "picture": "https://...",     # 프로필 사진 (Profile picture, nullable)
        "role": "USER",               # 역할 (Role name)
        "exp": 1234567890,            # 만료 시간 UNIX timestamp (Expiration)
        "type": "session"             # 토큰 유형 (Token type discriminator)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.config import settings
from app.schemas.auth import SessionUser


def create_session_token(user: SessionUser, expires_minutes: int | None = None) -> str:
    """세션 JWT를 생성합니다.

    Encode a principal into a signed session token.
    Token expires after SESSION_EXPIRE_MINUTES unless overridden.

    Args:
        user: 세션 주체 (Principal to encode)
        expires_minutes: 만료 시간(분) 재정의 (Optional TTL override)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    ttl: int = settings.SESSION_EXPIRE_MINUTES if expires_minutes is None else expires_minutes
    expire: datetime = datetime.now(timezone.utc) + timedelta(minutes=ttl)
    payload: dict[str, Any] = {
        "sub": str(user.id),
        "name": user.name,
        "email": user.email,
        "picture": user.picture,
        "role": user.role.value,
        "exp": expire,
        "type": "session",
    }
    return jwt.encode(payload, settings.SESSION_SECRET_KEY, algorithm=settings.SESSION_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(token, settings.SESSION_SECRET_KEY, algorithms=[settings.SESSION_ALGORITHM])


def read_session_token(token: str | None) -> SessionUser | None:
    """세션 쿠키 값을 주체로 변환합니다. 유효하지 않으면 None.

    Decode a session cookie into a principal. Missing, expired, tampered or
    malformed tokens all yield None, i.e. an anonymous request.
    """
    if not token:
        return None
    try:
        payload: dict[str, Any] = decode_token(token)
        if payload.get("type") != "session":
            return None
        return SessionUser(
            id=int(payload["sub"]),
            name=payload["name"],
            email=payload["email"],
            picture=payload.get("picture"),
            role=payload["role"],
        )
    except (jwt.InvalidTokenError, KeyError, ValueError):
        return None
