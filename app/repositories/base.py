"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic save, find, delete operations keyed by integer ids.

Usage:
    class PostsRepository(BaseRepository[Posts]):
        def __init__(self) -> None:
            super().__init__(Posts)
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    Repositories only flush; committing is the caller's (router's) job.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def save(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """엔티티를 저장하고 식별자/타임스탬프가 채워진 상태로 반환합니다.

        Persist an entity. New entities receive their generated id and
        timestamps; already-persistent entities have pending changes flushed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 저장할 엔티티 (Entity to persist)

        Returns:
            ModelType: 저장된 엔티티 (The persisted entity, refreshed)
        """
        db.add(entity)
        await db.flush()
        await db.refresh(entity)
        return entity

    async def find_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        return await db.get(self.model, record_id)

    async def find_all(self, db: AsyncSession) -> Sequence[ModelType]:
        """모든 레코드를 ID 오름차순(삽입 순)으로 조회합니다.

        Retrieve every record in ascending primary-key (insertion) order.
        """
        query: Select = select(self.model).order_by(self.model.id.asc())
        result = await db.execute(query)
        return result.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0

    async def delete(self, db: AsyncSession, entity: ModelType) -> None:
        """엔티티를 삭제합니다 (Delete a single entity)."""
        await db.delete(entity)
        await db.flush()

    async def delete_all(self, db: AsyncSession) -> None:
        """모든 레코드를 삭제합니다 — 테스트 정리용.

        Delete every record of this model. Intended for test teardown.
        Loaded instances of this model are expunged so that later lookups go
        back to the database; objects of other models stay attached.
        """
        await db.execute(delete(self.model))
        await db.flush()
        loaded = [obj for obj in db.sync_session.identity_map.values() if isinstance(obj, self.model)]
        for obj in loaded:
            db.expunge(obj)
