"""Store access: one repository per table, each bound to an injected session."""

from blog_api.repositories.credentials import CredentialRepository
from blog_api.repositories.posts import PostRepository
from blog_api.repositories.users import UserRepository

__all__ = ["UserRepository", "CredentialRepository", "PostRepository"]
