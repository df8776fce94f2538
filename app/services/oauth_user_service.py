"""OAuth2 사용자 서비스 — 제공자 프로필을 애플리케이션 주체로 변환.

OAuth2 user service — Maps a provider's user-info payload to the local
principal model, creating the user on first login and refreshing the
profile on later logins.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.auth import OAuthAttributes, SessionUser

logger = logging.getLogger(__name__)


class OAuthUserService:
    """OAuth2 사용자 서비스.

    Attributes:
        repository: 사용자 레포지토리 (User repository collaborator)
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository: UserRepository = repository

    async def load_user(
        self,
        db: AsyncSession,
        registration_id: str,
        user_name_attribute_name: str,
        profile: dict[str, Any],
    ) -> SessionUser:
        """원본 프로필로부터 세션 주체를 만듭니다.

        Given a raw profile payload, return a principal carrying an
        identifier and a role.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            registration_id: 제공자 등록 ID (e.g. "google")
            user_name_attribute_name: 제공자 식별 속성 키 (e.g. "sub")
            profile: 원본 user-info 응답 (Raw user-info payload)

        Returns:
            SessionUser: 세션에 저장할 주체 (Principal stored in the session)
        """
        attributes: OAuthAttributes = OAuthAttributes.of(registration_id, user_name_attribute_name, profile)
        user: User = await self.save_or_update(db, attributes)
        logger.info("OAuth2 login: provider=%s user_id=%s role=%s", registration_id, user.id, user.role.value)
        return SessionUser.from_user(user)

    async def save_or_update(self, db: AsyncSession, attributes: OAuthAttributes) -> User:
        """이메일로 기존 사용자를 찾아 갱신하거나, 없으면 새로 저장합니다.

        Update the profile of a returning user, or save a new GUEST user.
        """
        user: User | None = await self.repository.find_by_email(db, attributes.email)
        if user is None:
            user = attributes.to_entity()
        else:
            user.update(attributes.name, attributes.picture)
        return await self.repository.save(db, user)


# 싱글턴 인스턴스 — Singleton instance
oauth_user_service: OAuthUserService = OAuthUserService(user_repository)
