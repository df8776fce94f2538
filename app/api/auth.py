"""OAuth2 로그인 라우터 — 로그인 페이지, 제공자 리다이렉트, 콜백, 로그아웃.

OAuth2 Login Router — Login page, provider redirect, callback and logout.

Login Flow:
    1. GET /oauth2/authorization/{registration_id}
       state를 쿠키에 저장하고 제공자 인가 페이지로 이동
       (Store state in a cookie and redirect to the provider)
    2. GET /login/oauth2/code/{registration_id}?code=..&state=..
       state 검증 → 코드 교환 → 사용자 정보 조회 → 주체 매핑 → 세션 쿠키 발급
       (Verify state, exchange code, fetch profile, map to principal, set session)
    3. "/" 로 리다이렉트 (Redirect to the root page)
"""

import logging
import secrets
from html import escape
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError as ProfileValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.auth import SessionUser
from app.security.access import LOGIN_PAGE_URL, LOGOUT_SUCCESS_URL
from app.security.oauth2 import ClientRegistration, OAuth2Client, get_oauth2_client, get_registrations
from app.services.oauth_user_service import oauth_user_service
from app.utils.exceptions import BadRequestError, UnauthorizedError
from app.utils.jwt import create_session_token

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()

# state 쿠키 이름 — CSRF protection for the authorization round trip
STATE_COOKIE_NAME: str = "OAUTH2_STATE"


def _registration(registrations: dict[str, ClientRegistration], registration_id: str) -> ClientRegistration:
    registration: ClientRegistration | None = registrations.get(registration_id)
    if registration is None:
        raise BadRequestError(f"Unknown OAuth2 registration: {registration_id}")
    return registration


@router.get("/login", response_class=HTMLResponse)
async def login_page(
    registrations: Annotated[dict[str, ClientRegistration], Depends(get_registrations)],
) -> HTMLResponse:
    """로그인 제공자 목록 페이지 (Page listing the configured providers)."""
    links: str = "".join(
        f'<li><a href="/oauth2/authorization/{escape(r.registration_id)}">{escape(r.client_name)}</a></li>'
        for r in registrations.values()
    )
    return HTMLResponse(
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\"><title>Login</title></head>"
        f"<body><h2>Login with OAuth 2.0</h2><ul>{links}</ul></body></html>"
    )


@router.get("/oauth2/authorization/{registration_id}")
async def authorize_redirect(
    registration_id: str,
    registrations: Annotated[dict[str, ClientRegistration], Depends(get_registrations)],
) -> RedirectResponse:
    """제공자 인가 페이지로 리다이렉트합니다.

    Redirect to the provider's authorization endpoint.

    Raises:
        BadRequestError(400): 등록되지 않은 제공자 (Unknown registration id)
    """
    registration: ClientRegistration = _registration(registrations, registration_id)
    state: str = secrets.token_urlsafe(32)
    response = RedirectResponse(registration.authorization_url(state), status_code=status.HTTP_302_FOUND)
    response.set_cookie(STATE_COOKIE_NAME, state, max_age=600, httponly=True, samesite="lax")
    return response


@router.get("/login/oauth2/code/{registration_id}")
async def authorization_callback(
    registration_id: str,
    state: str,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    registrations: Annotated[dict[str, ClientRegistration], Depends(get_registrations)],
    client: Annotated[OAuth2Client, Depends(get_oauth2_client)],
    code: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """제공자 콜백 — 로그인을 완료하고 세션 쿠키를 발급합니다.

    Provider callback. Completes the login and issues the session cookie.
    A provider error (e.g. the user declined consent) or a missing code
    sends the user back to the login page with ``?error``.

    Raises:
        BadRequestError(400): 등록되지 않은 제공자 (Unknown registration id)
        UnauthorizedError(401): state 불일치 또는 제공자 통신 실패
                                (State mismatch or provider call failure)
    """
    registration: ClientRegistration = _registration(registrations, registration_id)
    if error or not code:
        logger.info("OAuth2 login failed: provider=%s error=%s", registration_id, error or "missing code")
        response = RedirectResponse(f"{LOGIN_PAGE_URL}?error", status_code=status.HTTP_302_FOUND)
        response.delete_cookie(STATE_COOKIE_NAME)
        return response

    expected_state: str | None = request.cookies.get(STATE_COOKIE_NAME)
    if not expected_state or not secrets.compare_digest(expected_state, state):
        raise UnauthorizedError("Invalid OAuth2 state")

    access_token: str = await client.exchange_code(registration, code, state)
    profile: dict[str, Any] = await client.fetch_user_info(registration, access_token)
    try:
        principal: SessionUser = await oauth_user_service.load_user(
            db, registration_id, registration.user_name_attribute_name, profile
        )
    except (KeyError, TypeError, ProfileValidationError) as e:
        logger.warning("OAuth2 profile rejected: provider=%s error=%r", registration_id, e)
        raise UnauthorizedError("OAuth2 profile has no usable name or email")
    await db.commit()

    response = RedirectResponse(LOGOUT_SUCCESS_URL, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        create_session_token(principal),
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
    )
    response.delete_cookie(STATE_COOKIE_NAME)
    return response


@router.api_route("/logout", methods=["GET", "POST"])
async def logout() -> RedirectResponse:
    """로그아웃 — 세션 쿠키를 지우고 "/"로 이동합니다.

    Clear the session cookie and redirect to the root path.
    """
    response = RedirectResponse(LOGOUT_SUCCESS_URL, status_code=status.HTTP_302_FOUND)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response
