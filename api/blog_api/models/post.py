"""Blog post model."""

import uuid

from sqlalchemy import TIMESTAMP, Boolean, CheckConstraint, Column, Index, String, Text, Uuid, false

from blog_api.config import settings
from blog_api.database import Base

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 300
CONTENT_MAX_LENGTH = 50_000


class Post(Base):
    """Blog post owned by the author username it was created with."""

    __tablename__ = settings.posts_table_name

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=False, default="")
    content = Column(Text, nullable=False)
    author = Column(String, nullable=False)
    # Not unique at the store level: uniqueness comes from the slug search in services.slugs.
    slug = Column(String, nullable=False)
    published = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False)

    __table_args__ = (
        CheckConstraint(f"length(content) <= {CONTENT_MAX_LENGTH}", name="ck_post_content_length"),
        Index(f"idx_{settings.posts_table_name}_slug", slug),
        Index(f"idx_{settings.posts_table_name}_author", author),
        Index(f"idx_{settings.posts_table_name}_published_created", published, created_at),
    )
