"""
Session token persistence.
"""

from .storage import SQLiteTokenStorage
from .store import TokenStore, ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY

__all__ = [
    "SQLiteTokenStorage",
    "TokenStore",
    "ACCESS_TOKEN_KEY",
    "REFRESH_TOKEN_KEY",
]
