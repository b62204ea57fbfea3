"""
Authenticated session lifecycle.
"""

from .context import SessionContext

__all__ = ["SessionContext"]
