"""
In-memory session tokens backed by durable storage.
"""

from typing import Optional

from ...core.models import SessionTokens
from ...utils.logging import get_logger
from .storage import SQLiteTokenStorage

ACCESS_TOKEN_KEY = "access_token"
REFRESH_TOKEN_KEY = "refresh_token"

logger = get_logger("mediapp.tokens")


class TokenStore:
    """
    Holds the current access/refresh tokens for one client instance.

    Writes go to memory and storage together. Reads are served from memory and
    fall back to storage when no access token is cached. Last write wins.
    """

    def __init__(self, storage: SQLiteTokenStorage):
        self.storage = storage
        self._access_token: Optional[str] = None
        self._refresh_token: Optional[str] = None

    def set(self, access_token: str, refresh_token: Optional[str] = None) -> None:
        """Replace the tokens; a missing refresh token removes the stored one."""
        self._access_token = access_token
        self.storage.set_item(ACCESS_TOKEN_KEY, access_token)

        if refresh_token:
            self._refresh_token = refresh_token
            self.storage.set_item(REFRESH_TOKEN_KEY, refresh_token)
        else:
            self._refresh_token = None
            self.storage.remove_item(REFRESH_TOKEN_KEY)

        logger.debug("Session tokens stored (refresh token: %s)", bool(refresh_token))

    def get(self) -> SessionTokens:
        """Return the current tokens, rehydrating from storage if needed."""
        if not self._access_token:
            self._access_token = self.storage.get_item(ACCESS_TOKEN_KEY)
            self._refresh_token = self.storage.get_item(REFRESH_TOKEN_KEY)
            if self._access_token:
                logger.debug("Session tokens rehydrated from storage")

        return SessionTokens(
            access_token=self._access_token,
            refresh_token=self._refresh_token,
        )

    def clear(self) -> None:
        """Forget both tokens in memory and in storage."""
        self._access_token = None
        self._refresh_token = None
        self.storage.remove_item(ACCESS_TOKEN_KEY)
        self.storage.remove_item(REFRESH_TOKEN_KEY)
        logger.debug("Session tokens cleared")
