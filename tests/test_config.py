import httpx
import pytest

from mediapp_client import create_client
from mediapp_client.config import GatewayConfig, Settings
from mediapp_client.core.enums import ProfileLoading, SessionState
from mediapp_client.core.models import LoginCredentials


def test_settings_defaults(monkeypatch):
    for var in ("MEDIAPP_GATEWAY_URL", "MEDIAPP_API_BASE_URL", "MEDIAPP_PROFILE_LOADING"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.api_base_url == "/api/v1"
    assert settings.profile_loading == ProfileLoading.DEFERRED
    assert GatewayConfig.from_settings(settings).get_base_url() == "http://localhost:8550/api/v1"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MEDIAPP_GATEWAY_URL", "https://gw.example.com/")
    monkeypatch.setenv("MEDIAPP_PROFILE_LOADING", "eager")
    monkeypatch.setenv("MEDIAPP_ADMIN_TOKEN", "s3cret")

    settings = Settings(_env_file=None)
    assert settings.profile_loading == ProfileLoading.EAGER
    config = GatewayConfig.from_settings(settings)
    assert config.admin_token == "s3cret"
    assert config.get_base_url() == "https://gw.example.com/api/v1"


@pytest.mark.parametrize("gateway_url,api_base_url,expected", [
    ("http://localhost:8550", "/api/v1", "http://localhost:8550/api/v1"),
    ("http://localhost:8550/", "api/v1/", "http://localhost:8550/api/v1"),
    ("http://ignored", "http://localhost:8550/api/v1/", "http://localhost:8550/api/v1"),
    ("http://localhost:8550", "", "http://localhost:8550"),
])
def test_base_url_resolution(gateway_url, api_base_url, expected):
    assert GatewayConfig(gateway_url=gateway_url, api_base_url=api_base_url).get_base_url() == expected


@pytest.mark.asyncio
async def test_create_client_shares_one_session(tmp_path):
    seen = []

    def handler(request):
        seen.append(request)
        if request.url.path == "/api/v1/auth/login":
            return httpx.Response(200, json={"accessToken": "acc"})
        return httpx.Response(200, json={"count": 2})

    settings = Settings(_env_file=None, gateway_url="http://gw.test", token_db_path=str(tmp_path / "t.db"))
    client = create_client(settings, transport=httpx.MockTransport(handler))

    await client.session.login(LoginCredentials(email="patient@mediapp.com", password="Patient123"))
    assert client.session.state == SessionState.PENDING_PROFILE
    assert await client.notifications.get_unread_count(7) == 2
    assert seen[-1].headers["Authorization"] == "Bearer acc"
    assert str(seen[-1].url) == "http://gw.test/api/v1/notifications/user/7/unread/count"
