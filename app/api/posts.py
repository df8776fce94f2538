"""게시글 API 라우터 — 게시글 CRUD REST 엔드포인트.

Posts API Router — REST endpoints mapping 1:1 onto PostsService.
Mounted under /api/v1/posts, so SecurityMiddleware requires the USER role.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_user
from app.database import get_db
from app.schemas.auth import SessionUser
from app.schemas.posts import (
    PostsListResponse,
    PostsResponse,
    PostsSaveRequest,
    PostsUpdateRequest,
)
from app.services.posts_service import posts_service

router: APIRouter = APIRouter()


@router.post("", response_model=int)
async def save_posts(
    data: PostsSaveRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[SessionUser, Depends(require_user)],
) -> int:
    """게시글을 등록하고 ID를 반환합니다.

    Create a post and return its id.
    """
    post_id: int = await posts_service.save(db, data)
    await db.commit()
    return post_id


@router.put("/{post_id}", response_model=int)
async def update_posts(
    post_id: int,
    data: PostsUpdateRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[SessionUser, Depends(require_user)],
) -> int:
    """게시글 제목/본문을 수정합니다.

    Update title and content of a post.
    """
    await posts_service.update(db, post_id, data)
    await db.commit()
    return post_id


@router.get("", response_model=list[PostsListResponse])
async def list_posts(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[SessionUser, Depends(require_user)],
) -> list[PostsListResponse]:
    """게시글 목록을 최신순으로 조회합니다."""
    posts = await posts_service.find_all_desc(db)
    return [PostsListResponse.from_entity(p) for p in posts]


@router.get("/{post_id}", response_model=PostsResponse)
async def get_posts(
    post_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[SessionUser, Depends(require_user)],
) -> PostsResponse:
    """게시글 상세를 조회합니다."""
    return PostsResponse.from_entity(await posts_service.find_by_id(db, post_id))


@router.delete("/{post_id}", response_model=int)
async def delete_posts(
    post_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[SessionUser, Depends(require_user)],
) -> int:
    """게시글을 삭제하고 ID를 반환합니다."""
    await posts_service.delete(db, post_id)
    await db.commit()
    return post_id
