"""Credential store: accounts, passwords and nickname rules."""

import asyncio
import json
from typing import Any

import structlog

from core.config import settings
from core.exceptions import (
    DuplicateNicknameError,
    InvalidCredentialsError,
    InvalidProfileError,
    NotFoundError,
    WeakPasswordError,
)
from core.security import PasswordHasher
from domain.entities.user import PROFILE_FIELDS, CredentialEntry, Plan, UserProfile
from domain.repositories.key_value_store import IKeyValueStore
from domain.services.session_service import SessionService

logger = structlog.get_logger()


def _validate_profile_field(field: str, value: Any) -> Any:
    """Return the normalized value or raise InvalidProfileError."""
    if field == "nickname":
        if not isinstance(value, str) or not value.strip():
            raise InvalidProfileError(field)
        return value.strip()
    if field == "plan":
        try:
            return Plan(value)
        except (ValueError, TypeError):
            raise InvalidProfileError(field) from None
    if value is not None and not isinstance(value, str):
        raise InvalidProfileError(field)
    return value


def _raw_nickname(item: Any) -> str | None:
    """Best-effort nickname of an entry that could not be decoded."""
    if isinstance(item, dict) and isinstance(item.get("user"), dict):
        nickname = item["user"].get("nickname")
        if isinstance(nickname, str):
            return nickname
    return None


class CredentialService:
    """Service layer for account business logic.

    All accounts live in one JSON record (``users``) mapping user id to
    ``{"user": profile, "passwordHash": digest}``. Read-modify-write cycles on
    that record are serialized by an instance lock. Entries that cannot be
    decoded are invisible to lookups but are written back untouched.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        sessions: SessionService,
        hasher: PasswordHasher | None = None,
        key: str = settings.users_key,
        min_password_length: int = settings.min_password_length,
    ) -> None:
        self._store = store
        self._sessions = sessions
        self._hasher = hasher or PasswordHasher()
        self._key = key
        self._min_password_length = min_password_length
        self._lock = asyncio.Lock()
        self._dummy_hash: str | None = None

    async def register(self, nickname: str, password: str) -> UserProfile:
        """Create an account and sign it in."""
        nickname = nickname.strip()
        async with self._lock:
            users, undecoded = await self._read()
            if self._nickname_taken(users, undecoded, nickname):
                raise DuplicateNicknameError(nickname)
            self._check_password_strength(password)

            profile = UserProfile(nickname=nickname)
            password_hash = await self._hasher.hash(password)
            users[profile.id] = CredentialEntry(user=profile, password_hash=password_hash)
            await self._save(users, undecoded)

        await self._sessions.set_session(profile)
        logger.info("user_registered", user_id=profile.id)
        return profile

    async def authenticate(self, nickname: str, password: str) -> UserProfile:
        """Verify a nickname/password pair and sign the user in."""
        users = await self._load()
        entry = self._find_by_nickname(users, nickname.strip())

        if entry is None:
            # Spend the same hashing work as a real check
            await self._hasher.verify(password, await self._get_dummy_hash())
            logger.info("authentication_failed")
            raise InvalidCredentialsError()

        if not await self._hasher.verify(password, entry.password_hash):
            logger.info("authentication_failed")
            raise InvalidCredentialsError()

        if self._hasher.needs_rehash(entry.password_hash):
            await self._upgrade_hash(entry, password)

        await self._sessions.set_session(entry.user)
        logger.info("user_authenticated", user_id=entry.user.id)
        return entry.user

    async def update_profile(self, user_id: str, updates: dict[str, Any]) -> UserProfile:
        """Shallow-merge profile fields. Renames re-check nickname uniqueness.

        Unknown keys, ``id`` and ``created_at`` are ignored. ``None`` leaves
        ``nickname`` and ``plan`` unchanged and clears the optional fields.
        """
        async with self._lock:
            users, undecoded = await self._read()
            entry = users.get(str(user_id))
            if entry is None:
                raise NotFoundError(str(user_id))

            changes: dict[str, Any] = {}
            for field, value in updates.items():
                if field not in PROFILE_FIELDS:
                    continue
                if value is None and field in ("nickname", "plan"):
                    continue
                changes[field] = _validate_profile_field(field, value)

            nickname = changes.get("nickname")
            if nickname is not None:
                existing = self._find_by_nickname(users, nickname)
                if existing is not None and existing.user.id != entry.user.id:
                    raise DuplicateNicknameError(nickname)
                if self._raw_nickname_taken(undecoded, nickname):
                    raise DuplicateNicknameError(nickname)

            entry.user = entry.user.merged(changes)
            await self._save(users, undecoded)

        await self._refresh_session(entry.user)
        logger.info("profile_updated", user_id=entry.user.id, fields=sorted(changes))
        return entry.user

    async def change_password(self, user_id: str, old_password: str, new_password: str) -> None:
        """Replace the password digest after checking the current password."""
        async with self._lock:
            users, undecoded = await self._read()
            entry = users.get(str(user_id))
            if entry is None:
                raise NotFoundError(str(user_id))
            if not await self._hasher.verify(old_password, entry.password_hash):
                raise InvalidCredentialsError()
            self._check_password_strength(new_password)

            entry.password_hash = await self._hasher.hash(new_password)
            await self._save(users, undecoded)

        logger.info("password_changed", user_id=str(user_id))

    async def delete_account(self, user_id: str) -> None:
        """Remove an account. No password re-confirmation is required."""
        user_id = str(user_id)
        async with self._lock:
            users, undecoded = await self._read()
            removed = users.pop(user_id, None)
            if removed is not None:
                await self._save(users, undecoded)

        current = await self._sessions.get_session()
        if current is not None and current.id == user_id:
            await self._sessions.clear()
        logger.info("account_deleted", user_id=user_id, existed=removed is not None)

    async def get_user(self, user_id: str) -> UserProfile | None:
        """Get a profile by id."""
        users = await self._load()
        entry = users.get(str(user_id))
        return entry.user if entry else None

    async def get_current_user(self) -> UserProfile | None:
        """Resolve the session pointer against the stored accounts.

        A pointer to an account that no longer exists is cleared.
        """
        session = await self._sessions.get_session()
        if session is None:
            return None
        user = await self.get_user(session.id)
        if user is None:
            await self._sessions.clear()
            return None
        if user != session:
            await self._sessions.set_session(user)
        return user

    async def sign_out(self) -> None:
        await self._sessions.clear()

    async def _refresh_session(self, profile: UserProfile) -> None:
        current = await self._sessions.get_session()
        if current is not None and current.id == profile.id:
            await self._sessions.set_session(profile)

    async def _upgrade_hash(self, entry: CredentialEntry, password: str) -> None:
        new_hash = await self._hasher.hash(password)
        async with self._lock:
            users, undecoded = await self._read()
            stored = users.get(entry.user.id)
            # Skip if the password changed meanwhile
            if stored is None or stored.password_hash != entry.password_hash:
                return
            stored.password_hash = new_hash
            await self._save(users, undecoded)
        logger.info("password_hash_upgraded", user_id=entry.user.id)

    async def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = await self._hasher.hash("not-a-real-password")
        return self._dummy_hash

    def _check_password_strength(self, password: str) -> None:
        if len(password) < self._min_password_length:
            raise WeakPasswordError(self._min_password_length)

    @staticmethod
    def _find_by_nickname(
        users: dict[str, CredentialEntry], nickname: str
    ) -> CredentialEntry | None:
        key = nickname.casefold()
        for entry in users.values():
            if entry.user.nickname_key == key:
                return entry
        return None

    @staticmethod
    def _raw_nickname_taken(undecoded: dict[str, Any], nickname: str) -> bool:
        key = nickname.casefold()
        return any(
            (raw := _raw_nickname(item)) is not None and raw.casefold() == key
            for item in undecoded.values()
        )

    def _nickname_taken(
        self, users: dict[str, CredentialEntry], undecoded: dict[str, Any], nickname: str
    ) -> bool:
        return (
            self._find_by_nickname(users, nickname) is not None
            or self._raw_nickname_taken(undecoded, nickname)
        )

    async def _load(self) -> dict[str, CredentialEntry]:
        users, _ = await self._read()
        return users

    async def _read(self) -> tuple[dict[str, CredentialEntry], dict[str, Any]]:
        """Read all accounts as ``(decoded, undecoded)``.

        A corrupt record reads as empty. Entries that fail to decode are
        returned raw so a later write can carry them over.
        """
        raw = await self._store.get_item(self._key)
        if raw is None:
            return {}, {}
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("users_record_corrupt", key=self._key)
            return {}, {}
        if not isinstance(data, dict):
            logger.warning("users_record_corrupt", key=self._key)
            return {}, {}

        users: dict[str, CredentialEntry] = {}
        undecoded: dict[str, Any] = {}
        for user_id, item in data.items():
            try:
                users[user_id] = CredentialEntry.from_dict(item)
            except (ValueError, KeyError, TypeError, AttributeError):
                logger.warning("user_entry_corrupt", user_id=user_id)
                undecoded[user_id] = item
        return users, undecoded

    async def _save(
        self, users: dict[str, CredentialEntry], undecoded: dict[str, Any]
    ) -> None:
        payload = dict(undecoded)
        payload.update((user_id, entry.to_dict()) for user_id, entry in users.items())
        await self._store.set_item(self._key, json.dumps(payload))
