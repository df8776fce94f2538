"""게시글 서비스 — 게시글 비즈니스 로직.

Posts Service — Thin layer over PostsRepository that translates entity
validation failures and missing ids into HTTP errors.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.posts import Posts, PostValidationError
from app.repositories.posts_repository import PostsRepository, posts_repository
from app.schemas.posts import PostsSaveRequest, PostsUpdateRequest
from app.utils.exceptions import NotFoundError, ValidationError


class PostsService:
    """게시글 서비스.

    Posts service providing save/update/find/delete operations.

    Attributes:
        repository: 게시글 레포지토리 (Posts repository collaborator)
    """

    def __init__(self, repository: PostsRepository) -> None:
        self.repository: PostsRepository = repository

    async def save(self, db: AsyncSession, data: PostsSaveRequest) -> int:
        """새 게시글을 저장하고 ID를 반환합니다.

        Save a new post and return its generated id.

        Raises:
            ValidationError: 제목/본문이 비었거나 제목이 너무 길 때
        """
        try:
            entity: Posts = data.to_entity()
        except PostValidationError as e:
            raise ValidationError(str(e))
        saved: Posts = await self.repository.save(db, entity)
        return saved.id

    async def update(self, db: AsyncSession, post_id: int, data: PostsUpdateRequest) -> int:
        """게시글 제목/본문을 수정합니다.

        Update title and content of an existing post. The change is flushed
        so it is visible to the rest of the session right away.

        Raises:
            NotFoundError: 게시글이 없을 때 (When the post does not exist)
            ValidationError: 제목/본문이 비었거나 제목이 너무 길 때
        """
        posts: Posts = await self.find_by_id(db, post_id)
        try:
            posts.update(data.title, data.content)
        except PostValidationError as e:
            raise ValidationError(str(e))
        await self.repository.save(db, posts)
        return post_id

    async def find_by_id(self, db: AsyncSession, post_id: int) -> Posts:
        """ID로 게시글을 조회합니다.

        Raises:
            NotFoundError: 게시글이 없을 때 (When the post does not exist)
        """
        posts: Posts | None = await self.repository.find_by_id(db, post_id)
        if posts is None:
            raise NotFoundError(f"해당 게시글이 없습니다. id={post_id}")
        return posts

    async def find_all_desc(self, db: AsyncSession) -> Sequence[Posts]:
        return await self.repository.find_all_desc(db)

    async def delete(self, db: AsyncSession, post_id: int) -> None:
        """게시글을 삭제합니다.

        Raises:
            NotFoundError: 게시글이 없을 때 (When the post does not exist)
        """
        posts: Posts = await self.find_by_id(db, post_id)
        await self.repository.delete(db, posts)


# 싱글턴 인스턴스 — Singleton instance
posts_service: PostsService = PostsService(posts_repository)
