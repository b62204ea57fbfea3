"""
Notifications API.
"""

from .service import NotificationsService

__all__ = ["NotificationsService"]
