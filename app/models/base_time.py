"""생성/수정 일시 공통 믹스인.

Base time entity mixin — Adds created/modified timestamps to a model.
Both columns are maintained by SQLAlchemy (insert default and onupdate);
callers never assign them directly.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseTimeEntity:
    """생성/수정 일시 믹스인.

    Mixin for ORM models that need audit timestamps.

    Attributes:
        created_date: 생성 일시 UTC (Set once on insert)
        modified_date: 수정 일시 UTC (Set on insert, refreshed on every update)
    """

    # 생성 일시 — Record creation timestamp (UTC)
    created_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    modified_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )
