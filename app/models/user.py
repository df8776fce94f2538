"""사용자 및 역할 관련 SQLAlchemy ORM 모델 정의.

User and Role SQLAlchemy ORM model definitions.
Users are created on their first OAuth2 login and refreshed on later logins.

Tables:
    - users: OAuth2 로그인 사용자 (Users federated from an external identity provider)
"""

import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base_time import BaseTimeEntity


class Role(str, enum.Enum):
    """역할 — 요청 경로별로 검사되는 권한 수준.

    Access level checked per request path. Stored by name.
        GUEST = 손님 (default for a new OAuth2 user)
        USER  = 일반 사용자 (required for /api/v1/**)
    """

    GUEST = "GUEST"
    USER = "USER"

    @property
    def key(self) -> str:
        """권한 키 (Authority key, e.g. "ROLE_USER")."""
        return f"ROLE_{self.value}"

    @property
    def display_name(self) -> str:
        """표시 이름 (Display name)."""
        return _ROLE_TITLES[self]


_ROLE_TITLES: dict[Role, str] = {
    Role.GUEST: "손님",
    Role.USER: "일반 사용자",
}


class User(BaseTimeEntity, Base):
    """사용자 모델 — OAuth2 제공자 프로필로부터 생성된 계정.

    User model — Account created from an OAuth2 provider profile.
    Email is the natural key used to match a returning user.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        name: 이름 (Display name from the provider)
        email: 이메일 (Unique email from the provider)
        picture: 프로필 사진 URL (Profile picture URL, optional)
        role: 역할 (Access level, GUEST on creation)
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    picture: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    # 역할 — Enum 이름으로 저장 (Stored as "GUEST"/"USER")
    role: Mapped[Role] = mapped_column(Enum(Role, native_enum=False, length=20), nullable=False, default=Role.GUEST)

    def update(self, name: str, picture: str | None) -> "User":
        """로그인 시 프로필 정보를 갱신합니다 (Refresh profile data on login)."""
        self.name = name
        self.picture = picture
        return self

    @property
    def role_key(self) -> str:
        return self.role.key
