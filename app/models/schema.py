"""엔티티-컬럼 매핑 테이블 및 기동 시 검증.

Explicit field → column mapping tables for every entity, validated against
the ORM metadata when the application starts. A drift between the declared
mapping and the ORM model aborts startup with ``SchemaMappingError``.
"""

import logging

from pydantic import BaseModel
from sqlalchemy import DateTime, Enum, Integer, MetaData, String, Text
from sqlalchemy.types import TypeEngine

logger = logging.getLogger(__name__)


class SchemaMappingError(RuntimeError):
    """선언된 매핑과 ORM 메타데이터 불일치 (Declared mapping does not match the ORM)."""


class ColumnSpec(BaseModel):
    """컬럼 명세 (Expected column definition)."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    column: str  # 컬럼명 (Column name)
    type_: type[TypeEngine]  # SQLAlchemy 타입 클래스 (Expected type class)
    nullable: bool = False
    length: int | None = None  # VARCHAR 길이 (String length, None = unbounded)
    primary_key: bool = False
    unique: bool = False


class TableSpec(BaseModel):
    """테이블 명세 — 엔티티 필드명 → 컬럼 명세 (Entity field → column spec)."""

    model_config = {"frozen": True}

    table: str
    fields: dict[str, ColumnSpec]


_TIMESTAMP_FIELDS: dict[str, ColumnSpec] = {
    "created_date": ColumnSpec(column="created_date", type_=DateTime),
    "modified_date": ColumnSpec(column="modified_date", type_=DateTime),
}

POSTS_SCHEMA = TableSpec(
    table="posts",
    fields={
        "id": ColumnSpec(column="id", type_=Integer, primary_key=True),
        "title": ColumnSpec(column="title", type_=String, length=500),
        "content": ColumnSpec(column="content", type_=Text),
        "author": ColumnSpec(column="author", type_=String, nullable=True, length=255),
        **_TIMESTAMP_FIELDS,
    },
)

USERS_SCHEMA = TableSpec(
    table="users",
    fields={
        "id": ColumnSpec(column="id", type_=Integer, primary_key=True),
        "name": ColumnSpec(column="name", type_=String, length=255),
        "email": ColumnSpec(column="email", type_=String, length=255, unique=True),
        "picture": ColumnSpec(column="picture", type_=String, nullable=True, length=1024),
        "role": ColumnSpec(column="role", type_=Enum, length=20),
        **_TIMESTAMP_FIELDS,
    },
)

ENTITY_SCHEMAS: list[TableSpec] = [POSTS_SCHEMA, USERS_SCHEMA]


def _column_problems(table: str, field: str, spec: ColumnSpec, metadata: MetaData) -> list[str]:
    column = metadata.tables[table].columns.get(spec.column)
    where = f"{table}.{spec.column} ({field})"
    if column is None:
        return [f"{where}: column missing"]

    problems: list[str] = []
    if not isinstance(column.type, spec.type_):
        problems.append(f"{where}: expected {spec.type_.__name__}, got {type(column.type).__name__}")
    # primary key 컬럼은 항상 NOT NULL
    if not spec.primary_key and column.nullable != spec.nullable:
        problems.append(f"{where}: expected nullable={spec.nullable}")
    if column.primary_key != spec.primary_key:
        problems.append(f"{where}: expected primary_key={spec.primary_key}")
    if bool(column.unique) != spec.unique:
        problems.append(f"{where}: expected unique={spec.unique}")
    if spec.length is not None and getattr(column.type, "length", None) != spec.length:
        problems.append(f"{where}: expected length={spec.length}")
    return problems


def validate_schema_mappings(metadata: MetaData, schemas: list[TableSpec] | None = None) -> None:
    """선언된 매핑을 ORM 메타데이터와 대조합니다.

    Compare every declared table spec with the ORM metadata.

    Args:
        metadata: 검증 대상 메타데이터 (Usually ``Base.metadata``)
        schemas: 검증할 테이블 명세 목록 (Defaults to ``ENTITY_SCHEMAS``)

    Raises:
        SchemaMappingError: 누락/불일치 컬럼이 하나라도 있을 때 (On any mismatch)
    """
    problems: list[str] = []
    for spec in schemas if schemas is not None else ENTITY_SCHEMAS:
        if spec.table not in metadata.tables:
            problems.append(f"{spec.table}: table not mapped")
            continue
        for field, column_spec in spec.fields.items():
            problems.extend(_column_problems(spec.table, field, column_spec, metadata))

    if problems:
        raise SchemaMappingError("; ".join(problems))
    logger.info("Schema mappings validated for %d tables", len(schemas or ENTITY_SCHEMAS))
