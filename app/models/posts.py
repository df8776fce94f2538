"""게시글 SQLAlchemy ORM 모델 정의.

Posts SQLAlchemy ORM model definition.

Tables:
    - posts: 게시글 (Blog posts with title, body and optional author)
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base_time import BaseTimeEntity

# 제목 최대 길이 — posts.title VARCHAR(500)
TITLE_MAX_LENGTH: int = 500


class PostValidationError(ValueError):
    """게시글 필수 필드 검증 실패 (Empty or oversized required field)."""


def _require_text(field: str, value: str | None, max_length: int | None = None) -> str:
    if value is None or not value.strip():
        raise PostValidationError(f"{field} must not be empty")
    if max_length is not None and len(value) > max_length:
        raise PostValidationError(f"{field} must be at most {max_length} characters")
    return value


class Posts(BaseTimeEntity, Base):
    """게시글 모델.

    Posts model — A blog post. Constructed once (directly or via ``builder()``)
    and afterwards mutated only through ``update()``; the id, author and
    timestamps are never reassigned by application code.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key, assigned on flush)
        title: 제목 (Title, required, max 500 chars)
        content: 본문 (Body text, required)
        author: 작성자 (Author, optional)
        created_date: 생성 일시 (Inherited from BaseTimeEntity)
        modified_date: 수정 일시 (Inherited from BaseTimeEntity)
    """

    __tablename__ = "posts"

    # 게시글 고유 식별자 — Auto-increment primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 제목 — Title (VARCHAR(500) NOT NULL)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    # 본문 — Body (TEXT NOT NULL)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # 작성자 — Author, usually the writer's email
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __init__(self, title: str, content: str, author: str | None = None) -> None:
        super().__init__()
        self.title = _require_text("title", title, TITLE_MAX_LENGTH)
        self.content = _require_text("content", content)
        self.author = author

    @classmethod
    def builder(cls) -> "PostsBuilder":
        """빌더를 반환합니다 (Return a fluent builder for a new post)."""
        return PostsBuilder()

    def update(self, title: str, content: str) -> None:
        """제목과 본문을 함께 교체합니다.

        Replace title and content together. Both values are validated before
        either is assigned, so a failed update leaves the post untouched.

        Raises:
            PostValidationError: 제목/본문이 비었거나 제목이 너무 길 때
        """
        title = _require_text("title", title, TITLE_MAX_LENGTH)
        content = _require_text("content", content)
        self.title = title
        self.content = content

    def __repr__(self) -> str:
        return f"<Posts id={self.id} title={self.title!r}>"


class PostsBuilder:
    """게시글 빌더 — 어느 필드에 어떤 값을 채우는지 명확하게 드러냅니다.

    Fluent builder for :class:`Posts`. Validation happens in ``build()``.
    """

    def __init__(self) -> None:
        self._title: str | None = None
        self._content: str | None = None
        self._author: str | None = None

    def title(self, title: str) -> "PostsBuilder":
        self._title = title
        return self

    def content(self, content: str) -> "PostsBuilder":
        self._content = content
        return self

    def author(self, author: str | None) -> "PostsBuilder":
        self._author = author
        return self

    def build(self) -> Posts:
        return Posts(title=self._title, content=self._content, author=self._author)
