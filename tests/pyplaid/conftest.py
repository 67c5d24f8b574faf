"""Shared pytest fixtures for pyplaid tests.

Payload builders and the scripted transport live in ``plaid_fixtures``.
"""

from collections.abc import Generator

import pytest
from plaid_fixtures import FakeTransport

from pyplaid.client import PlaidClient
from pyplaid.config import clear_settings_cache
from pyplaid.credentials import Credentials


@pytest.fixture(autouse=True)
def clean_settings_state() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="test-client-id", secret="test-secret")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport, credentials: Credentials) -> PlaidClient:
    """Client on the sandbox environment backed by the scripted transport."""
    return PlaidClient(transport=transport, credentials=credentials)
