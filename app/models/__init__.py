"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
startup schema validation.

Modules:
    base_time: 생성/수정 일시 믹스인 (Created/modified timestamp mixin)
    posts: 게시글 (Posts and its builder)
    user: 사용자 및 역할 (User and Role)
    schema: 엔티티-컬럼 매핑 검증 (Field → column mapping validation)
"""

from app.models.base_time import BaseTimeEntity
from app.models.posts import Posts, PostsBuilder, PostValidationError
from app.models.user import Role, User

__all__ = [
    "BaseTimeEntity",
    "Posts", "PostsBuilder", "PostValidationError",
    "Role", "User",
]
