"""Unit tests for SessionService."""

import pytest

from domain.entities.user import Plan, UserProfile
from domain.services.session_service import SessionService
from infrastructure.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(nickname="alice", email="alice@example.com", plan=Plan.PRO)


class TestSessionLifecycle:
    async def test_empty_store_is_signed_out(self, session_service: SessionService):
        assert await session_service.get_session() is None
        assert await session_service.is_authenticated() is False

    async def test_set_then_get_returns_equal_profile(
        self, session_service: SessionService, profile: UserProfile
    ):
        await session_service.set_session(profile)

        assert await session_service.get_session() == profile
        assert await session_service.is_authenticated() is True

    async def test_set_none_clears(
        self,
        session_service: SessionService,
        profile: UserProfile,
        store: InMemoryKeyValueStore,
    ):
        await session_service.set_session(profile)

        await session_service.set_session(None)

        assert await session_service.get_session() is None
        assert "current_user" not in store.snapshot()

    async def test_overwrite(self, session_service: SessionService, profile: UserProfile):
        other = UserProfile(nickname="bob")
        await session_service.set_session(profile)

        await session_service.set_session(other)

        assert (await session_service.get_session()).id == other.id

    async def test_custom_key(self, store: InMemoryKeyValueStore, profile: UserProfile):
        service = SessionService(store, key="vertox_current_user")

        await service.set_session(profile)

        assert "vertox_current_user" in store.snapshot()


class TestCorruptSession:
    @pytest.mark.parametrize(
        "raw",
        ["{oops", "[]", '"just a string"', "42", '{"nickname": "no-id"}', "null"],
    )
    async def test_malformed_record_reads_as_signed_out(
        self, store: InMemoryKeyValueStore, session_service: SessionService, raw: str
    ):
        await store.set_item("current_user", raw)

        assert await session_service.get_session() is None


class TestListeners:
    async def test_listener_receives_changes(
        self, session_service: SessionService, profile: UserProfile
    ):
        seen: list[UserProfile | None] = []
        session_service.subscribe(seen.append)

        await session_service.set_session(profile)
        await session_service.clear()

        assert seen == [profile, None]

    async def test_unsubscribe(self, session_service: SessionService, profile: UserProfile):
        seen: list[UserProfile | None] = []
        unsubscribe = session_service.subscribe(seen.append)

        unsubscribe()
        await session_service.set_session(profile)

        assert seen == []

    async def test_failing_listener_does_not_break_write(
        self, session_service: SessionService, profile: UserProfile
    ):
        def boom(_: UserProfile | None) -> None:
            raise RuntimeError("listener failure")

        seen: list[UserProfile | None] = []
        session_service.subscribe(boom)
        session_service.subscribe(seen.append)

        await session_service.set_session(profile)

        assert await session_service.get_session() == profile
        assert seen == [profile]
