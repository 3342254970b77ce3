"""Authentication utilities for the blog API."""

from blog_api.auth.jwt import create_access_token, decode_token, verify_token
from blog_api.auth.password import dummy_password_hash, hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "dummy_password_hash",
    "create_access_token",
    "decode_token",
    "verify_token",
]
