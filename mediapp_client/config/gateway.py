"""
Gateway connection configuration.
"""

from typing import Optional
from pydantic import BaseModel

from .settings import Settings


class GatewayConfig(BaseModel):
    """Resolved gateway connection settings."""

    gateway_url: str = "http://localhost:8550"
    api_base_url: str = "/api/v1"
    admin_token: Optional[str] = None
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "GatewayConfig":
        """Build the gateway config from client settings."""
        return cls(
            gateway_url=settings.gateway_url,
            api_base_url=settings.api_base_url,
            admin_token=settings.admin_token,
            timeout=settings.request_timeout,
        )

    def is_absolute_base(self) -> bool:
        """Check if the API base already names a host."""
        return self.api_base_url.startswith(("http://", "https://"))

    def get_base_url(self) -> str:
        """
        Get the address every endpoint path is appended to.

        A relative API prefix such as ``/api/v1`` is anchored on the gateway URL.
        """
        if self.is_absolute_base():
            return self.api_base_url.rstrip("/")
        prefix = self.api_base_url.strip("/")
        gateway = self.gateway_url.rstrip("/")
        return f"{gateway}/{prefix}" if prefix else gateway
