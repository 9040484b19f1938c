"""Dependency injection factories for API v1."""

from functools import lru_cache

from core.config import settings
from domain.repositories.key_value_store import IKeyValueStore
from domain.services.credential_service import CredentialService
from domain.services.session_service import SessionService
from domain.services.settings_service import SettingsService
from infrastructure.database.session import async_session_factory
from infrastructure.storage.memory_store import InMemoryKeyValueStore
from infrastructure.storage.sqlalchemy_store import SQLAlchemyKeyValueStore


@lru_cache
def get_key_value_store() -> IKeyValueStore:
    """Get the configured key-value substrate."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    return SQLAlchemyKeyValueStore(async_session_factory)


@lru_cache
def get_session_service() -> SessionService:
    """Get Session service instance."""
    return SessionService(get_key_value_store())


@lru_cache
def get_credential_service() -> CredentialService:
    """Get Credential service instance."""
    return CredentialService(get_key_value_store(), get_session_service())


@lru_cache
def get_settings_service() -> SettingsService:
    """Get Settings service instance."""
    return SettingsService(get_key_value_store())
