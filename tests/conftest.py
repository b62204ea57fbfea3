"""
Pytest configuration and fixtures.
"""

import json

import httpx
import pytest

from mediapp_client.core.enums import ProfileLoading
from mediapp_client.services import (
    AuthService,
    BookingsService,
    DoctorsService,
    GatewayClient,
    NotificationsService,
    SQLiteTokenStorage,
    TokenStore,
    UsersService,
)
from mediapp_client.session import SessionContext

BASE_URL = "http://gateway.test/api/v1"
API_PREFIX = "/api/v1"


class GatewayStub:
    """Routes (method, path) pairs to canned responses and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, response):
        """Register a response, or a callable taking the request."""
        self.routes[(method, API_PREFIX + path)] = response

    def json(self, method, path, payload, status_code=200):
        self.add(method, path, httpx.Response(status_code, json=payload))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"message": "Not found"})
        if callable(response):
            return response(request)
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def stub():
    return GatewayStub()


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "tokens.db")


@pytest.fixture
def token_store(db_path):
    return TokenStore(SQLiteTokenStorage(db_path))


@pytest.fixture
def gateway(stub, token_store):
    return GatewayClient(BASE_URL, token_store, transport=stub.transport())


@pytest.fixture
def auth_service(gateway):
    return AuthService(gateway)


@pytest.fixture
def users_service(gateway):
    return UsersService(gateway, admin_token="admin-secret")


@pytest.fixture
def doctors_service(gateway):
    return DoctorsService(gateway)


@pytest.fixture
def bookings_service(gateway):
    return BookingsService(gateway)


@pytest.fixture
def notifications_service(gateway):
    return NotificationsService(gateway)


@pytest.fixture
def make_session(auth_service, users_service, token_store):
    def _make(profile_loading=ProfileLoading.DEFERRED):
        return SessionContext(auth_service, users_service, token_store, profile_loading)
    return _make


@pytest.fixture
def profile_payload():
    return {
        "data": {
            "userId": 7,
            "email": "patient@mediapp.com",
            "firstName": "Pat",
            "lastName": "Ient",
            "phoneNumber": "555-0100",
            "dateOfBirth": "1990-04-01",
            "role": "PATIENT",
        }
    }
