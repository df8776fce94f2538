"""게시글 엔티티/레포지토리 테스트.

Posts entity and repository tests.
Tests save/find round trip, timestamps, update semantics and validation.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.posts import Posts, PostValidationError
from app.models.user import Role, User
from app.repositories.posts_repository import posts_repository
from app.repositories.user_repository import user_repository


class TestPostsRepository:
    """게시글 저장/조회 테스트."""

    async def test_save_and_find_all(self, db: AsyncSession):
        """게시글 저장 후 목록 조회."""
        await posts_repository.save(db, Posts.builder()
            .title("테스트 게시글")
            .content("테스트 본문")
            .author("hd15807@gmail.com")
            .build())

        posts_list = await posts_repository.find_all(db)

        assert len(posts_list) == 1
        posts = posts_list[0]
        assert posts.title == "테스트 게시글"
        assert posts.content == "테스트 본문"
        assert posts.author == "hd15807@gmail.com"

    async def test_timestamps_are_populated(self, db: AsyncSession):
        """저장 시 생성/수정 일시가 채워짐."""
        posts = await posts_repository.save(db, Posts(title="title", content="content"))

        assert posts.id is not None
        assert posts.created_date is not None
        assert posts.modified_date is not None

    async def test_find_all_in_insertion_order(self, db: AsyncSession):
        """find_all은 삽입 순, find_all_desc는 최신순."""
        for i in range(3):
            await posts_repository.save(db, Posts(title=f"title{i}", content="content"))

        assert [p.title for p in await posts_repository.find_all(db)] == ["title0", "title1", "title2"]
        assert [p.title for p in await posts_repository.find_all_desc(db)] == ["title2", "title1", "title0"]

    async def test_delete_all(self, db: AsyncSession):
        """전체 삭제 후 목록이 비어 있음."""
        await posts_repository.save(db, Posts(title="a", content="b"))
        await posts_repository.save(db, Posts(title="c", content="d"))

        await posts_repository.delete_all(db)

        assert await posts_repository.find_all(db) == []
        assert await posts_repository.count(db) == 0

    async def test_delete_all_keeps_other_models_attached(self, db: AsyncSession):
        """게시글 전체 삭제 후에도 이미 로드된 사용자 변경은 저장됨."""
        user = await user_repository.save(db, User(name="a", email="a@test.com", role=Role.GUEST))
        await posts_repository.save(db, Posts(title="t", content="c"))
        await db.commit()

        await posts_repository.delete_all(db)
        user.update("renamed", None)
        await db.commit()
        db.expunge_all()

        found = await user_repository.find_by_email(db, "a@test.com")
        assert found.name == "renamed"
        assert await posts_repository.count(db) == 0

    async def test_find_by_id_missing(self, db: AsyncSession):
        """없는 ID 조회 시 None."""
        assert await posts_repository.find_by_id(db, 999) is None


class TestPostsEntity:
    """게시글 엔티티 규칙 테스트."""

    async def test_update_keeps_id_and_author(self, db: AsyncSession):
        """수정은 제목/본문만 바꾸고 ID/작성자는 유지."""
        posts = await posts_repository.save(db, Posts(title="title", content="content", author="author"))
        post_id = posts.id

        posts.update("title2", "content2")
        await posts_repository.save(db, posts)

        found = await posts_repository.find_by_id(db, post_id)
        assert found.id == post_id
        assert found.title == "title2"
        assert found.content == "content2"
        assert found.author == "author"

    def test_author_is_optional(self):
        """작성자는 선택 항목."""
        assert Posts(title="title", content="content").author is None

    @pytest.mark.parametrize("title,content", [
        ("", "content"),
        ("   ", "content"),
        ("title", ""),
        ("x" * 501, "content"),
    ])
    def test_invalid_fields_rejected(self, title: str, content: str):
        """빈 제목/본문, 500자 초과 제목은 거부."""
        with pytest.raises(PostValidationError):
            Posts.builder().title(title).content(content).build()

    def test_title_at_max_length_accepted(self):
        """정확히 500자 제목은 허용."""
        assert len(Posts(title="x" * 500, content="content").title) == 500

    def test_failed_update_leaves_post_untouched(self):
        """검증 실패한 수정은 아무 것도 바꾸지 않음."""
        posts = Posts(title="title", content="content")

        with pytest.raises(PostValidationError):
            posts.update("new title", "")

        assert posts.title == "title"
        assert posts.content == "content"
