"""create_posts_and_users

Revision ID: a1f0c3d2e4b5
Revises:
Create Date: 2026-10-19 10:00:00.000000

게시글/사용자 테이블 생성: posts, users.
Create the posts and users tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1f0c3d2e4b5'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # posts — 게시글 (title VARCHAR(500) NOT NULL, content TEXT NOT NULL)
    op.create_table(
        'posts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author', sa.String(255), nullable=True),
        sa.Column('created_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('modified_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    # users — OAuth2 로그인 사용자 (email unique, role GUEST/USER)
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('picture', sa.String(1024), nullable=True),
        sa.Column('role', sa.String(20), server_default='GUEST', nullable=False),
        sa.Column('created_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('modified_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('users')
    op.drop_table('posts')
