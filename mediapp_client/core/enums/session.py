"""
Session lifecycle enums.
"""

from enum import Enum


class SessionState(str, Enum):
    """Authentication states of the client session."""

    UNAUTHENTICATED = "unauthenticated"
    PENDING_PROFILE = "pending_profile"
    AUTHENTICATED = "authenticated"


class ProfileLoading(str, Enum):
    """When the session loads the user profile."""

    # Fetch on login/startup; a failed fetch signs the user out
    EAGER = "eager"
    # Fetch only on request; a valid token alone keeps the session
    DEFERRED = "deferred"
