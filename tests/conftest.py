"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Configure the app for tests before anything imports core.config
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.security import PasswordHasher
from domain.services.credential_service import CredentialService
from domain.services.session_service import SessionService
from domain.services.settings_service import SettingsService
from infrastructure.storage.memory_store import InMemoryKeyValueStore

# Cheap hashing keeps the suite fast; production uses scrypt
TEST_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """A fresh, empty key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(method=TEST_HASH_METHOD)


@pytest.fixture
def session_service(store: InMemoryKeyValueStore) -> SessionService:
    return SessionService(store)


@pytest.fixture
def credential_service(
    store: InMemoryKeyValueStore,
    session_service: SessionService,
    hasher: PasswordHasher,
) -> CredentialService:
    return CredentialService(store, session_service, hasher=hasher)


@pytest.fixture
def settings_service(store: InMemoryKeyValueStore) -> SettingsService:
    return SettingsService(store)


@pytest.fixture
async def client(
    store: InMemoryKeyValueStore,
    session_service: SessionService,
    credential_service: CredentialService,
    settings_service: SettingsService,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client backed by an isolated in-memory store.

    Every test gets its own store, so accounts and sessions never leak
    between tests.
    """
    from api.v1.dependencies import (
        get_credential_service,
        get_key_value_store,
        get_session_service,
        get_settings_service,
    )
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_key_value_store] = lambda: store
    app.dependency_overrides[get_session_service] = lambda: session_service
    app.dependency_overrides[get_credential_service] = lambda: credential_service
    app.dependency_overrides[get_settings_service] = lambda: settings_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def signed_in_client(client: AsyncClient) -> AsyncClient:
    """Client with an account 'alice' / 'password1' signed in."""
    response = await client.post(
        "/api/v1/auth/signup",
        json={"nickname": "alice", "password": "password1"},
    )
    assert response.status_code == 201
    return client
