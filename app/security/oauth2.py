"""OAuth2 클라이언트 등록 정보 및 제공자 통신.

OAuth2 client registrations and the provider-facing HTTP calls.
The identity provider is an external collaborator: this module only builds
the authorization URL, exchanges the code for an access token and fetches
the user-info payload.
"""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from app.config import settings
from app.utils.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


class ClientRegistration(BaseModel):
    """OAuth2 클라이언트 등록 정보.

    Attributes:
        registration_id: 등록 ID (e.g. "google")
        client_name: 표시 이름 (Login button label)
        client_id: 클라이언트 ID
        client_secret: 클라이언트 시크릿
        authorization_uri: 인가 엔드포인트 (Authorization endpoint)
        token_uri: 토큰 엔드포인트 (Token endpoint)
        user_info_uri: 사용자 정보 엔드포인트 (User-info endpoint)
        user_name_attribute_name: 사용자 식별 속성 (Subject attribute in the profile)
        scope: 요청 스코프 (Requested scopes)
    """

    model_config = {"frozen": True}

    registration_id: str
    client_name: str
    client_id: str
    client_secret: str
    authorization_uri: str
    token_uri: str
    user_info_uri: str
    user_name_attribute_name: str
    scope: tuple[str, ...] = ()

    @property
    def redirect_uri(self) -> str:
        """콜백 URL — {base}/login/oauth2/code/{registration_id}"""
        return f"{settings.OAUTH2_REDIRECT_BASE_URL.rstrip('/')}/login/oauth2/code/{self.registration_id}"

    def authorization_url(self, state: str) -> str:
        """제공자 인가 페이지 URL을 생성합니다 (Build the provider's authorization URL)."""
        params: dict[str, str] = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "state": state,
        }
        if self.scope:
            params["scope"] = " ".join(self.scope)
        return f"{self.authorization_uri}?{urlencode(params)}"


def build_registrations() -> dict[str, ClientRegistration]:
    """설정에 클라이언트 ID가 있는 제공자만 등록합니다.

    Register the providers whose client id is configured.
    """
    registrations: dict[str, ClientRegistration] = {}
    if settings.GOOGLE_CLIENT_ID:
        registrations["google"] = ClientRegistration(
            registration_id="google",
            client_name="Google",
            client_id=settings.GOOGLE_CLIENT_ID,
            client_secret=settings.GOOGLE_CLIENT_SECRET,
            authorization_uri="https://accounts.google.com/o/oauth2/v2/auth",
            token_uri="https://oauth2.googleapis.com/token",
            user_info_uri="https://openidconnect.googleapis.com/v1/userinfo",
            user_name_attribute_name="sub",
            scope=("profile", "email"),
        )
    if settings.NAVER_CLIENT_ID:
        registrations["naver"] = ClientRegistration(
            registration_id="naver",
            client_name="Naver",
            client_id=settings.NAVER_CLIENT_ID,
            client_secret=settings.NAVER_CLIENT_SECRET,
            authorization_uri="https://nid.naver.com/oauth2.0/authorize",
            token_uri="https://nid.naver.com/oauth2.0/token",
            user_info_uri="https://openapi.naver.com/v1/nid/me",
            user_name_attribute_name="response",
            scope=("name", "email", "profile_image"),
        )
    return registrations


def _json_body(response: httpx.Response, registration: ClientRegistration, what: str) -> Any:
    """제공자 응답 본문을 JSON으로 해석합니다.

    Raises:
        UnauthorizedError(401): 본문이 JSON이 아닐 때 (Non-JSON provider response)
    """
    try:
        return response.json()
    except ValueError:
        logger.warning("Non-JSON %s response: provider=%s", what, registration.registration_id)
        raise UnauthorizedError(f"OAuth2 {what} response is not JSON")


class OAuth2Client:
    """제공자 HTTP 클라이언트 — 코드 교환 및 사용자 정보 조회.

    HTTP client for the provider's token and user-info endpoints. Transport
    errors and non-JSON bodies surface as 401, never as a server error.
    """

    def __init__(self, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._timeout: float = timeout
        self._transport: httpx.AsyncBaseTransport | None = transport

    async def exchange_code(self, registration: ClientRegistration, code: str, state: str) -> str:
        """인가 코드를 액세스 토큰으로 교환합니다.

        Raises:
            UnauthorizedError(401): 토큰 교환 실패 (Token exchange failed)
        """
        data: dict[str, str] = {
            "grant_type": "authorization_code",
            "code": code,
            "state": state,
            "redirect_uri": registration.redirect_uri,
            "client_id": registration.client_id,
            "client_secret": registration.client_secret,
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(registration.token_uri, data=data, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            logger.warning("Token exchange failed: provider=%s error=%r", registration.registration_id, e)
            raise UnauthorizedError("OAuth2 token exchange failed")
        if response.status_code != 200:
            logger.warning("Token exchange failed: provider=%s status=%s", registration.registration_id, response.status_code)
            raise UnauthorizedError("OAuth2 token exchange failed")
        payload: Any = _json_body(response, registration, "token")
        access_token: Any = payload.get("access_token") if isinstance(payload, dict) else None
        if not access_token or not isinstance(access_token, str):
            raise UnauthorizedError("OAuth2 token response has no access_token")
        return access_token

    async def fetch_user_info(self, registration: ClientRegistration, access_token: str) -> dict[str, Any]:
        """액세스 토큰으로 사용자 정보를 조회합니다.

        Raises:
            UnauthorizedError(401): 사용자 정보 조회 실패 (User-info request failed)
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(
                    registration.user_info_uri,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logger.warning("User-info request failed: provider=%s error=%r", registration.registration_id, e)
            raise UnauthorizedError("OAuth2 user-info request failed")
        if response.status_code != 200:
            logger.warning("User-info request failed: provider=%s status=%s", registration.registration_id, response.status_code)
            raise UnauthorizedError("OAuth2 user-info request failed")
        return _json_body(response, registration, "user-info")


def get_registrations() -> dict[str, ClientRegistration]:
    """FastAPI 의존성 — 등록된 제공자 목록 (Overridable in tests)."""
    return build_registrations()


def get_oauth2_client() -> OAuth2Client:
    """FastAPI 의존성 — 제공자 HTTP 클라이언트 (Overridable in tests)."""
    return OAuth2Client()
