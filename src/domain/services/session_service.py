"""Session pointer: who is signed in on this client."""

import json
from typing import Callable

import structlog

from core.config import settings
from domain.entities.user import UserProfile
from domain.repositories.key_value_store import IKeyValueStore

logger = structlog.get_logger()

SessionListener = Callable[[UserProfile | None], None]


class SessionService:
    """Stores a copy of the signed-in user's profile under a single key.

    The pointer is a cache of the credential store: CredentialService
    refreshes it on every profile change and clears it when the account is
    deleted. It is never used to verify credentials.
    """

    def __init__(self, store: IKeyValueStore, key: str = settings.session_key) -> None:
        self._store = store
        self._key = key
        self._listeners: list[SessionListener] = []

    async def set_session(self, profile: UserProfile | None) -> None:
        """Overwrite the pointer. ``None`` signs out."""
        if profile is None:
            await self._store.remove_item(self._key)
        else:
            await self._store.set_item(self._key, json.dumps(profile.to_dict()))
        self._notify(profile)

    async def get_session(self) -> UserProfile | None:
        """Read the pointer. Missing or malformed data reads as signed out."""
        raw = await self._store.get_item(self._key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
            return UserProfile.from_dict(data)
        except (ValueError, KeyError, TypeError, AttributeError):
            logger.warning("session_record_corrupt", key=self._key)
            return None

    async def clear(self) -> None:
        await self.set_session(None)

    async def is_authenticated(self) -> bool:
        return await self.get_session() is not None

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Call ``listener`` after every set/clear. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, profile: UserProfile | None) -> None:
        for listener in list(self._listeners):
            try:
                listener(profile)
            except Exception:
                logger.exception("session_listener_failed")
