"""Initial schema: profiles, credentials and posts."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

from blog_api.config import settings

revision = "20261018_01_initial"
down_revision = None
branch_labels = None
depends_on = None

USERS = settings.users_table_name
CREDENTIALS = settings.credentials_table_name
POSTS = settings.posts_table_name


def upgrade() -> None:
    op.create_table(
        USERS,
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("profile_image_base64", sa.Text(), nullable=True),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.UniqueConstraint("username", name=f"uq_{USERS}_username"),
    )

    op.create_table(
        CREDENTIALS,
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("hashed_password", sa.Text(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.UniqueConstraint("username", name=f"uq_{CREDENTIALS}_username"),
    )

    op.create_table(
        POSTS,
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.CheckConstraint("length(content) <= 50000", name="ck_post_content_length"),
    )
    op.create_index(f"idx_{POSTS}_slug", POSTS, ["slug"])
    op.create_index(f"idx_{POSTS}_author", POSTS, ["author"])
    op.create_index(f"idx_{POSTS}_published_created", POSTS, ["published", "created_at"])


def downgrade() -> None:
    op.drop_index(f"idx_{POSTS}_published_created", table_name=POSTS)
    op.drop_index(f"idx_{POSTS}_author", table_name=POSTS)
    op.drop_index(f"idx_{POSTS}_slug", table_name=POSTS)
    op.drop_table(POSTS)
    op.drop_table(CREDENTIALS)
    op.drop_table(USERS)
