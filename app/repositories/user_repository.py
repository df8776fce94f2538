"""사용자 레포지토리 — 사용자 관련 DB 쿼리 담당.

User Repository — Handles user lookups for the OAuth2 login flow.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 레포지토리.

    Extends:
        BaseRepository[User]
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def find_by_email(self, db: AsyncSession, email: str) -> User | None:
        """이메일로 사용자를 조회합니다.

        Find a user by email, the natural key shared with the identity provider.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 사용자 이메일 (User email)

        Returns:
            User | None: 조회된 사용자 또는 None (Found user or None)
        """
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
