"""Shared fixtures for end-to-end API tests."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from vent.config import AuthSettings
from vent.interface.api.app import create_app
from vent.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


@pytest.fixture
def signed_in_client(client):
    """Test client carrying a registered user's auth cookie.

    Yields the client and the user's ID.
    """
    user_id = str(uuid4())
    client.cookies.set("auth_token", create_token(user_id, "sam", AuthSettings()))
    yield client, user_id
