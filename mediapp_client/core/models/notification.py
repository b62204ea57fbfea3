"""
Notification data models.
"""

from typing import List, Optional
from pydantic import Field

from .base import CanonicalModel


class Notification(CanonicalModel):
    """User notification."""

    notification_id: Optional[int] = None
    user_id: Optional[int] = None
    message: str = ""
    type: str = "UNKNOWN"
    read: bool = False
    created_at: Optional[str] = None


class NotificationPage(CanonicalModel):
    """One page of a user's notifications."""

    content: List[Notification] = Field(default_factory=list)
