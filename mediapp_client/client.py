"""
Client factory: wires one session through every API.
"""

from typing import Optional

import httpx

from .config import GatewayConfig, Settings, get_settings
from .services import (
    AuthService,
    BookingsService,
    DoctorsService,
    GatewayClient,
    NotificationsService,
    SQLiteTokenStorage,
    TokenStore,
    UsersService,
)
from .session import SessionContext
from .utils.logging import configure_logging


class MediAppClient:
    """Entry point holding the token store, the APIs and the session."""

    def __init__(
        self,
        settings: Settings,
        token_store: TokenStore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.gateway_config = GatewayConfig.from_settings(settings)
        self.token_store = token_store

        self.gateway = GatewayClient(
            base_url=self.gateway_config.get_base_url(),
            token_store=token_store,
            timeout=self.gateway_config.timeout,
            transport=transport,
        )
        self.auth = AuthService(self.gateway)
        self.users = UsersService(self.gateway, admin_token=self.gateway_config.admin_token)
        self.doctors = DoctorsService(self.gateway)
        self.bookings = BookingsService(self.gateway)
        self.notifications = NotificationsService(self.gateway)
        self.session = SessionContext(
            auth=self.auth,
            users=self.users,
            token_store=token_store,
            profile_loading=settings.profile_loading,
        )


def create_client(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> MediAppClient:
    """Create a configured client instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    storage = SQLiteTokenStorage(settings.token_db_path)
    return MediAppClient(settings, TokenStore(storage), transport=transport)
