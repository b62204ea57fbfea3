"""
Tests for the session lifecycle.
"""

import pytest

from mediapp_client.core.enums import ProfileLoading, SessionState
from mediapp_client.core.exceptions import HttpError, LoginResponseError
from mediapp_client.core.models import LoginCredentials, PatientRegistration

CREDENTIALS = LoginCredentials(email="patient@mediapp.com", password="Patient123")


@pytest.fixture
def login_ok(stub):
    stub.json("POST", "/auth/login", {"accessToken": "issued-access", "refreshToken": "issued-refresh"})


class TestDeferredSession:
    """Token alone is enough; profile failures never sign the user out."""

    @pytest.mark.asyncio
    async def test_starts_unauthenticated(self, make_session):
        session = make_session()
        assert session.is_loading is True

        assert await session.initialize() == SessionState.UNAUTHENTICATED
        assert session.is_loading is False
        assert session.is_authenticated is False

    @pytest.mark.asyncio
    async def test_login_persists_tokens_and_defers_profile(self, stub, make_session, token_store, login_ok, profile_payload):
        session = make_session()

        assert await session.login(CREDENTIALS) == SessionState.PENDING_PROFILE
        assert session.is_authenticated is True
        assert session.user is None
        assert token_store.get().access_token == "issued-access"
        assert token_store.get().refresh_token == "issued-refresh"
        assert len(stub.requests) == 1

        stub.json("GET", "/users/me", profile_payload)
        user = await session.fetch_user()
        assert stub.last.headers["Authorization"] == "Bearer issued-access"
        assert user.user_id == 7
        assert session.state == SessionState.AUTHENTICATED

    @pytest.mark.asyncio
    async def test_profile_failure_keeps_tokens(self, stub, make_session, token_store, login_ok):
        stub.json("GET", "/users/me", {"message": "Unauthorized"}, status_code=401)
        session = make_session()
        await session.login(CREDENTIALS)

        assert await session.fetch_user() is None
        assert session.state == SessionState.PENDING_PROFILE
        assert token_store.get().access_token == "issued-access"

    @pytest.mark.asyncio
    async def test_resumes_from_stored_token_without_fetching(self, stub, make_session, token_store):
        token_store.set("stored-access")
        session = make_session()

        assert await session.initialize() == SessionState.PENDING_PROFILE
        assert stub.requests == []

    @pytest.mark.asyncio
    async def test_ensure_user_fetches_once(self, stub, make_session, token_store, profile_payload):
        token_store.set("stored-access")
        stub.json("GET", "/users/me", profile_payload)
        session = make_session()

        first = await session.ensure_user()
        second = await session.ensure_user()
        assert first is second
        assert len(stub.requests) == 1

    @pytest.mark.asyncio
    async def test_ensure_user_without_token(self, stub, make_session):
        assert await make_session().ensure_user() is None
        assert stub.requests == []


class TestEagerSession:
    """Profile is loaded on login and startup; failures clear the session."""

    @pytest.mark.asyncio
    async def test_login_fetches_profile(self, stub, make_session, login_ok, profile_payload):
        stub.json("GET", "/users/me", profile_payload)
        session = make_session(ProfileLoading.EAGER)

        assert await session.login(CREDENTIALS) == SessionState.AUTHENTICATED
        assert session.user.email == "patient@mediapp.com"
        assert stub.last.headers["Authorization"] == "Bearer issued-access"

    @pytest.mark.asyncio
    async def test_profile_failure_clears_tokens(self, stub, make_session, token_store, login_ok):
        stub.json("GET", "/users/me", {"message": "Token expired"}, status_code=401)
        session = make_session(ProfileLoading.EAGER)

        assert await session.login(CREDENTIALS) == SessionState.UNAUTHENTICATED
        assert session.is_authenticated is False
        assert token_store.get().access_token is None

    @pytest.mark.asyncio
    async def test_startup_with_invalid_stored_token_signs_out(self, stub, make_session, token_store):
        token_store.set("expired")
        stub.json("GET", "/users/me", {"message": "Token expired"}, status_code=401)
        session = make_session(ProfileLoading.EAGER)

        assert await session.initialize() == SessionState.UNAUTHENTICATED
        assert session.is_loading is False


class TestLoginFailures:
    """Login and registration errors always reach the caller."""

    @pytest.mark.asyncio
    async def test_invalid_credentials(self, stub, make_session, token_store):
        stub.json("POST", "/auth/login", {"message": "Invalid credentials"}, status_code=401)
        session = make_session()

        with pytest.raises(HttpError) as exc_info:
            await session.login(CREDENTIALS)
        assert str(exc_info.value) == "Invalid credentials"
        assert session.state == SessionState.UNAUTHENTICATED
        assert token_store.get().access_token is None

    @pytest.mark.asyncio
    async def test_missing_access_token(self, stub, make_session):
        stub.json("POST", "/auth/login", {"refreshToken": "only-refresh"})

        with pytest.raises(LoginResponseError, match="did not include an access token"):
            await make_session().login(CREDENTIALS)

    @pytest.mark.asyncio
    async def test_registration_failure_skips_login(self, stub, make_session):
        stub.json("POST", "/users/register/patient", {"message": "Email already registered"}, status_code=409)
        data = PatientRegistration(email="a@x.com", password="p", first_name="A", last_name="B")

        with pytest.raises(HttpError, match="Email already registered"):
            await make_session().register(data)
        assert len(stub.requests) == 1


@pytest.mark.asyncio
async def test_register_auto_logs_in(stub, make_session, token_store, login_ok):
    stub.json("POST", "/users/register/patient", {"data": {"userId": 15}})
    data = PatientRegistration(email="new@mediapp.com", password="Secret123", first_name="New", last_name="Patient")

    assert await make_session().register(data) == SessionState.PENDING_PROFILE
    assert stub.last_body() == {"email": "new@mediapp.com", "password": "Secret123"}
    assert token_store.get().access_token == "issued-access"


@pytest.mark.asyncio
async def test_logout(make_session, token_store, login_ok):
    session = make_session()
    await session.login(CREDENTIALS)

    session.logout()

    assert session.state == SessionState.UNAUTHENTICATED
    assert session.user is None
    assert token_store.get().access_token is None
