"""
Authentication API.
"""

from ...core.models import AuthTokens, LoginCredentials
from ...normalization import extract_field, normalize_auth_tokens
from ..gateway import GatewayClient


class AuthService:
    """Login, token refresh and token validation."""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    async def login(self, credentials: LoginCredentials) -> AuthTokens:
        """Exchange credentials for tokens. The caller decides whether to store them."""
        result = await self.gateway.post("/auth/login", body=credentials.to_payload())
        return normalize_auth_tokens(result)

    async def refresh(self, refresh_token: str) -> str:
        """Get a new access token for a refresh token."""
        result = await self.gateway.post("/auth/refresh", body={"refreshToken": refresh_token})
        return extract_field(result, "accessToken")

    async def validate(self, token: str) -> bool:
        result = await self.gateway.post("/auth/validate", body={"token": token})
        return bool(extract_field(result, "valid"))
