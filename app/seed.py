"""초기 데이터 시드 스크립트 — 테이블 생성 및 샘플 게시글.

Seed script — Creates the tables and a welcome post for local development.
Production schemas are managed by Alembic; this script is for a fresh
SQLite database.

Usage:
    python -m app.seed
"""

import asyncio
import logging

from sqlalchemy import select

from app.database import Base, async_session, engine
from app.models import Posts
from app.models.schema import validate_schema_mappings
from app.repositories.posts_repository import posts_repository

logger = logging.getLogger(__name__)


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Create tables if they don't exist, then insert a welcome post.

    Idempotent: 게시글이 이미 있으면 건너뜁니다 (Skips if any post exists).
    """
    validate_schema_mappings(Base.metadata)

    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Posts.id).limit(1))
        if result.scalar_one_or_none() is not None:
            logger.info("Already seeded. Skipping.")
            return

        await posts_repository.save(
            db,
            Posts.builder()
            .title("환영합니다")
            .content("첫 번째 게시글입니다.")
            .author("admin@example.com")
            .build(),
        )
        await db.commit()
        logger.info("Seed complete: 1 post created.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
