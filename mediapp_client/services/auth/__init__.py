"""
Auth API.
"""

from .service import AuthService

__all__ = ["AuthService"]
