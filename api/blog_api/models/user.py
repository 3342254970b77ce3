"""User profile and credential models."""

import uuid

from sqlalchemy import TIMESTAMP, Column, String, Text, Uuid

from blog_api.config import settings
from blog_api.database import Base


class User(Base):
    """
    Author-facing user profile.

    ``username`` is the mutable display name. It starts out equal to the
    login identifier stored on :class:`Credential` but may diverge after a
    profile update.
    """

    __tablename__ = settings.users_table_name

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    profile_image_base64 = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False)


class Credential(Base):
    """Login identity: immutable username paired with its bcrypt hash."""

    __tablename__ = settings.credentials_table_name

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String, unique=True, nullable=False)
    hashed_password = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False)
