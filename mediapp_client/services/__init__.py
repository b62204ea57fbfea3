"""
Service layer for the MediApp client.
"""

from .tokens import TokenStore, SQLiteTokenStorage
from .gateway import GatewayClient
from .auth import AuthService
from .users import UsersService
from .doctors import DoctorsService
from .bookings import BookingsService
from .notifications import NotificationsService

__all__ = [
    "TokenStore",
    "SQLiteTokenStorage",
    "GatewayClient",
    "AuthService",
    "UsersService",
    "DoctorsService",
    "BookingsService",
    "NotificationsService",
]
