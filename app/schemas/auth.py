"""인증 관련 Pydantic 스키마 정의.

Authentication-related Pydantic schema definitions.
Covers the provider-profile mapping (OAuthAttributes) and the session
principal (SessionUser) stored in the signed session cookie.
"""

from typing import Any

from pydantic import BaseModel

from app.models.user import Role, User


class OAuthAttributes(BaseModel):
    """OAuth2 제공자 프로필 → 애플리케이션 사용자 매핑 결과.

    Normalised view of a raw user-info payload. Each provider nests and
    names its fields differently; ``of()`` hides that difference.

    Attributes:
        attributes: 원본 프로필 (Raw provider payload, or its nested part)
        name_attribute_key: 사용자 식별 속성 키 (Provider's subject attribute, e.g. "sub")
        name: 이름 (Display name)
        email: 이메일 (Email address)
        picture: 프로필 사진 URL (Profile picture URL, optional)
    """

    attributes: dict[str, Any]
    name_attribute_key: str
    name: str
    email: str
    picture: str | None = None

    @classmethod
    def of(
        cls,
        registration_id: str,
        user_name_attribute_name: str,
        attributes: dict[str, Any],
    ) -> "OAuthAttributes":
        """제공자별 프로필을 공통 속성으로 변환합니다.

        Build attributes from a provider payload. Naver wraps the profile in
        a ``response`` object; every other provider is read like Google.

        Args:
            registration_id: 제공자 등록 ID (e.g. "google", "naver")
            user_name_attribute_name: 식별 속성 키 (Subject attribute name)
            attributes: 원본 프로필 (Raw user-info payload)

        Raises:
            KeyError: 이름/이메일이 프로필에 없을 때 (Profile lacks name or email)
        """
        if registration_id == "naver":
            return cls.of_naver("id", attributes)
        return cls.of_google(user_name_attribute_name, attributes)

    @classmethod
    def of_google(cls, user_name_attribute_name: str, attributes: dict[str, Any]) -> "OAuthAttributes":
        return cls(
            attributes=attributes,
            name_attribute_key=user_name_attribute_name,
            name=attributes["name"],
            email=attributes["email"],
            picture=attributes.get("picture"),
        )

    @classmethod
    def of_naver(cls, user_name_attribute_name: str, attributes: dict[str, Any]) -> "OAuthAttributes":
        response: dict[str, Any] = attributes["response"]
        return cls(
            attributes=response,
            name_attribute_key=user_name_attribute_name,
            name=response["name"],
            email=response["email"],
            picture=response.get("profile_image"),
        )

    def to_entity(self) -> User:
        """처음 가입하는 사용자 엔티티를 생성합니다 — 기본 역할은 GUEST.

        Build a new User for a first-time login. New users start as GUEST.
        """
        return User(name=self.name, email=self.email, picture=self.picture, role=Role.GUEST)


class SessionUser(BaseModel):
    """세션 주체 — 인증된 요청에 연결된 사용자.

    Session principal. Carries an identifier and a role, which is all the
    access-control layer needs, plus display fields for the pages.

    Attributes:
        id: 사용자 ID (User primary key)
        name: 이름 (Display name)
        email: 이메일 (Email address)
        picture: 프로필 사진 URL (Profile picture URL, optional)
        role: 역할 (Access level)
    """

    id: int
    name: str
    email: str
    picture: str | None = None
    role: Role

    @classmethod
    def from_user(cls, user: User) -> "SessionUser":
        return cls(id=user.id, name=user.name, email=user.email, picture=user.picture, role=user.role)

    def has_role(self, role: Role) -> bool:
        return self.role == role
