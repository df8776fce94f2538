"""게시글 관련 Pydantic 요청/응답 스키마 정의.

Posts-related Pydantic request/response schema definitions.
Only request/response marshalling lives here; title/content rules are
enforced by the Posts entity itself.
"""

from datetime import datetime

from pydantic import BaseModel

from app.models.posts import Posts


class PostsSaveRequest(BaseModel):
    """게시글 등록 요청 스키마.

    Attributes:
        title: 제목 (Title)
        content: 본문 (Body)
        author: 작성자 (Author, optional)
    """

    title: str
    content: str
    author: str | None = None

    def to_entity(self) -> Posts:
        return Posts.builder().title(self.title).content(self.content).author(self.author).build()


class PostsUpdateRequest(BaseModel):
    """게시글 수정 요청 스키마 — 제목과 본문을 함께 교체.

    Attributes:
        title: 새 제목 (New title)
        content: 새 본문 (New body)
    """

    title: str
    content: str


class PostsResponse(BaseModel):
    """게시글 상세 응답 스키마 (Post detail response)."""

    id: int
    title: str
    content: str
    author: str | None

    @classmethod
    def from_entity(cls, entity: Posts) -> "PostsResponse":
        return cls(id=entity.id, title=entity.title, content=entity.content, author=entity.author)


class PostsListResponse(BaseModel):
    """게시글 목록 항목 응답 스키마 (Post list item response)."""

    id: int
    title: str
    author: str | None
    modified_date: datetime

    @classmethod
    def from_entity(cls, entity: Posts) -> "PostsListResponse":
        return cls(
            id=entity.id,
            title=entity.title,
            author=entity.author,
            modified_date=entity.modified_date,
        )
