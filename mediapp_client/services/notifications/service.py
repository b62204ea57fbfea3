"""
Notifications API.
"""

from ...core.models import NotificationPage
from ...normalization import normalize_notification_page, normalize_unread_count
from ...utils.query import build_path
from ..gateway import GatewayClient


class NotificationsService:
    """User notifications."""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    async def get_user_notifications(self, user_id: int, page: int = 0, size: int = 10) -> NotificationPage:
        result = await self.gateway.get(build_path(f"/notifications/user/{user_id}", page=page, size=size))
        return normalize_notification_page(result)

    async def mark_as_read(self, notification_id: int) -> None:
        await self.gateway.put(f"/notifications/{notification_id}/read")

    async def get_unread_count(self, user_id: int) -> int:
        result = await self.gateway.get(f"/notifications/user/{user_id}/unread/count")
        return normalize_unread_count(result)
