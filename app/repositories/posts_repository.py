"""게시글 레포지토리 — 게시글 관련 DB 쿼리 담당.

Posts Repository — Handles all post-related database queries.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.posts import Posts
from app.repositories.base import BaseRepository


class PostsRepository(BaseRepository[Posts]):
    """게시글 레포지토리.

    Extends:
        BaseRepository[Posts]
    """

    def __init__(self) -> None:
        super().__init__(Posts)

    async def find_all_desc(self, db: AsyncSession) -> Sequence[Posts]:
        """게시글을 최신순(ID 내림차순)으로 조회합니다.

        Retrieve all posts, newest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            Sequence[Posts]: 최신순 게시글 목록 (Posts ordered by id descending)
        """
        query: Select = select(Posts).order_by(Posts.id.desc())
        result = await db.execute(query)
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
posts_repository: PostsRepository = PostsRepository()
