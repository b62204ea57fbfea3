"""
Authentication data models.
"""

from typing import Optional

from .base import CanonicalModel


class LoginCredentials(CanonicalModel):
    """Email and password pair sent to ``/auth/login``."""

    email: str
    password: str


class AuthTokens(CanonicalModel):
    """Tokens issued by a successful login."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    user_id: Optional[int] = None


class SessionTokens(CanonicalModel):
    """Tokens currently held by the session."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
