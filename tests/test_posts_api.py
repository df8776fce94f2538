"""게시글 API 테스트.

Posts API tests.
Tests CRUD through /api/v1/posts and the role gate in front of it.
"""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.posts import Posts
from app.repositories.posts_repository import posts_repository
from tests.conftest import session_header

POSTS_URL = "/api/v1/posts"


class TestPostsCRUD:
    """게시글 CRUD 테스트 (USER 역할)."""

    async def test_save_posts(self, client: AsyncClient, db: AsyncSession, user_token):
        """게시글 등록 후 ID 반환."""
        res = await client.post(POSTS_URL, json={
            "title": "title",
            "content": "content",
            "author": "author",
        }, headers=session_header(user_token))
        assert res.status_code == 200
        assert res.json() > 0

        all_posts = await posts_repository.find_all(db)
        assert len(all_posts) == 1
        assert all_posts[0].title == "title"
        assert all_posts[0].content == "content"

    async def test_update_posts(self, client: AsyncClient, db: AsyncSession, user_token):
        """게시글 수정 — 제목/본문만 변경."""
        saved = await posts_repository.save(db, Posts(title="title", content="content", author="author"))
        await db.commit()

        res = await client.put(f"{POSTS_URL}/{saved.id}", json={
            "title": "title2",
            "content": "content2",
        }, headers=session_header(user_token))
        assert res.status_code == 200
        assert res.json() == saved.id

        res = await client.get(f"{POSTS_URL}/{saved.id}", headers=session_header(user_token))
        data = res.json()
        assert data["title"] == "title2"
        assert data["content"] == "content2"
        assert data["author"] == "author"

    async def test_list_posts_newest_first(self, client: AsyncClient, user_token):
        """목록은 최신순."""
        for title in ("first", "second"):
            await client.post(POSTS_URL, json={"title": title, "content": "c"}, headers=session_header(user_token))

        res = await client.get(POSTS_URL, headers=session_header(user_token))
        assert res.status_code == 200
        data = res.json()
        assert [p["title"] for p in data] == ["second", "first"]
        assert "modified_date" in data[0]
        assert "content" not in data[0]

    async def test_delete_posts(self, client: AsyncClient, user_token):
        """게시글 삭제 후 조회 시 404."""
        post_id = (await client.post(POSTS_URL, json={
            "title": "t", "content": "c",
        }, headers=session_header(user_token))).json()

        res = await client.delete(f"{POSTS_URL}/{post_id}", headers=session_header(user_token))
        assert res.status_code == 200
        assert res.json() == post_id

        res = await client.get(f"{POSTS_URL}/{post_id}", headers=session_header(user_token))
        assert res.status_code == 404

    async def test_get_missing_posts(self, client: AsyncClient, user_token):
        """없는 게시글 조회/수정/삭제는 404."""
        headers = session_header(user_token)
        assert (await client.get(f"{POSTS_URL}/999", headers=headers)).status_code == 404
        res = await client.put(f"{POSTS_URL}/999", json={"title": "t", "content": "c"}, headers=headers)
        assert res.status_code == 404
        assert "id=999" in res.json()["detail"]
        assert (await client.delete(f"{POSTS_URL}/999", headers=headers)).status_code == 404

    async def test_save_empty_title_rejected(self, client: AsyncClient, user_token):
        """빈 제목은 422."""
        res = await client.post(POSTS_URL, json={"title": "", "content": "c"}, headers=session_header(user_token))
        assert res.status_code == 422

    async def test_save_too_long_title_rejected(self, client: AsyncClient, user_token):
        """500자 초과 제목은 422."""
        res = await client.post(POSTS_URL, json={"title": "x" * 501, "content": "c"}, headers=session_header(user_token))
        assert res.status_code == 422


class TestPostsAccess:
    """게시글 API 접근 제어 테스트."""

    async def test_anonymous_redirected_to_login(self, client: AsyncClient):
        """비로그인 요청은 로그인 페이지로 302."""
        res = await client.post(POSTS_URL, json={"title": "t", "content": "c"})
        assert res.status_code == 302
        assert res.headers["location"] == "/login"

    async def test_guest_forbidden(self, client: AsyncClient, db: AsyncSession, guest_token):
        """GUEST 역할은 403, 게시글은 저장되지 않음."""
        res = await client.post(POSTS_URL, json={"title": "t", "content": "c"}, headers=session_header(guest_token))
        assert res.status_code == 403
        assert await posts_repository.count(db) == 0

    async def test_guest_forbidden_on_read(self, client: AsyncClient, guest_token):
        """조회도 USER 역할 필요."""
        res = await client.get(POSTS_URL, headers=session_header(guest_token))
        assert res.status_code == 403

    async def test_tampered_cookie_is_anonymous(self, client: AsyncClient, user_token):
        """변조된 세션 쿠키는 비로그인으로 취급."""
        res = await client.get(POSTS_URL, headers=session_header(user_token + "x"))
        assert res.status_code == 302


class TestPages:
    """게시판 HTML 페이지 테스트."""

    async def test_index_lists_posts(self, client: AsyncClient, db: AsyncSession):
        """루트 페이지는 누구나 접근, 게시글 제목 표시."""
        await posts_repository.save(db, Posts(title="페이지 제목", content="c", author="a@test.com"))
        await db.commit()

        res = await client.get("/")
        assert res.status_code == 200
        assert "페이지 제목" in res.text
        assert 'href="/login"' in res.text

    async def test_index_shows_logged_in_user(self, client: AsyncClient, user_token):
        """로그인 시 사용자 이름과 로그아웃 링크 표시."""
        res = await client.get("/", headers=session_header(user_token))
        assert res.status_code == 200
        assert "테스트 사용자" in res.text
        assert 'href="/logout"' in res.text

    async def test_save_page_requires_login(self, client: AsyncClient):
        """등록 페이지는 인증 필요."""
        res = await client.get("/posts/save")
        assert res.status_code == 302

    async def test_update_page(self, client: AsyncClient, db: AsyncSession, user_token):
        """수정 페이지는 기존 값을 채워서 보여줌."""
        saved = await posts_repository.save(db, Posts(title="수정할 제목", content="본문"))
        await db.commit()

        res = await client.get(f"/posts/update/{saved.id}", headers=session_header(user_token))
        assert res.status_code == 200
        assert "수정할 제목" in res.text

    async def test_save_page_prefills_author(self, client: AsyncClient, guest_token):
        """등록 페이지는 로그인 이메일을 작성자로 채움, 역할 무관."""
        res = await client.get("/posts/save", headers=session_header(guest_token))
        assert res.status_code == 200
        assert 'value="guest@test.com"' in res.text

    async def test_index_shows_role(self, client: AsyncClient, guest_token):
        """사용자 바에 역할 표시 이름 표시."""
        res = await client.get("/", headers=session_header(guest_token))
        assert "(손님)" in res.text
