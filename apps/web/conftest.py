"""
Pytest configuration for Django app tests.

The ordering API is faked at the HTTP transport with respx; no test talks
to a real server.
"""

from django.test import Client as DjangoTestClient

import pytest
import respx

from apps.web.backend.tests.factories import UserPayloadFactory

API_URL = "http://api.slooze.test"
TOKEN = "test-access-token"


@pytest.fixture(autouse=True)
def api_settings(settings):
    """Point the site at the fake API."""
    settings.SLOOZE_API_URL = API_URL
    settings.SLOOZE_TOKEN_COOKIE = "access_token"
    settings.SLOOZE_RESTAURANTS_PAGE_SIZE = 3


@pytest.fixture
def api_mock():
    """respx router for the ordering API."""
    with respx.mock(base_url=API_URL, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def anon_client() -> DjangoTestClient:
    """A browser without an access token cookie."""
    return DjangoTestClient()


@pytest.fixture
def http_client() -> DjangoTestClient:
    """A browser holding an access token cookie."""
    client = DjangoTestClient()
    client.cookies["access_token"] = TOKEN
    return client


def _login_as(api_mock, role: str, country: str = "INDIA") -> dict:
    payload = UserPayloadFactory(role=role, country=country)
    api_mock.get("/auth/me").respond(200, json=payload)
    return payload


@pytest.fixture
def member(api_mock) -> dict:
    """/auth/me reports a MEMBER."""
    return _login_as(api_mock, "MEMBER")


@pytest.fixture
def admin(api_mock) -> dict:
    """/auth/me reports an ADMIN."""
    return _login_as(api_mock, "ADMIN")


@pytest.fixture
def manager(api_mock) -> dict:
    """/auth/me reports a MANAGER based in AMERICA."""
    return _login_as(api_mock, "MANAGER", country="AMERICA")
