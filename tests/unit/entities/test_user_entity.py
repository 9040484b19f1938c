"""Unit tests for user entities."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from domain.entities.user import PLAN_CATALOG, CredentialEntry, Plan, UserProfile


class TestUserProfile:
    def test_defaults(self):
        profile = UserProfile(nickname="alice")

        assert profile.plan is Plan.FREE
        assert profile.email is None
        assert profile.created_at.tzinfo is timezone.utc

    def test_plan_string_is_coerced(self):
        assert UserProfile(nickname="a", plan="premium").plan is Plan.PREMIUM  # type: ignore[arg-type]

    def test_unknown_plan_rejected(self):
        with pytest.raises(ValueError):
            UserProfile(nickname="a", plan="platinum")  # type: ignore[arg-type]

    def test_dict_round_trip_uses_camel_case(self):
        profile = UserProfile(nickname="alice", country="DE")

        data = profile.to_dict()

        assert "createdAt" in data
        assert UserProfile.from_dict(data) == profile

    def test_from_dict_accepts_browser_timestamps(self):
        data = {
            "id": str(uuid4()),
            "nickname": "bob",
            "plan": "pro",
            "createdAt": "2025-03-01T12:00:00.000Z",
        }

        profile = UserProfile.from_dict(data)

        assert profile.created_at == datetime(2025, 3, 1, 12, tzinfo=timezone.utc)
        assert profile.plan is Plan.PRO

    @pytest.mark.parametrize("raw_id", ["1705000000000", "user-7", 1705000000000])
    def test_from_dict_keeps_opaque_ids(self, raw_id):
        data = {"id": raw_id, "nickname": "bob", "createdAt": "2024-01-11T19:06:40Z"}

        profile = UserProfile.from_dict(data)

        assert profile.id == str(raw_id)
        assert profile.to_dict()["id"] == str(raw_id)

    @pytest.mark.parametrize("raw_id", ["", None, True, ["x"]])
    def test_from_dict_rejects_missing_ids(self, raw_id):
        data = {"id": raw_id, "nickname": "bob", "createdAt": "2024-01-11T19:06:40Z"}

        with pytest.raises(ValueError):
            UserProfile.from_dict(data)

    def test_new_ids_are_uuid_strings(self):
        profile = UserProfile(nickname="alice")

        assert str(UUID(profile.id)) == profile.id

    def test_merged_keeps_required_fields(self):
        profile = UserProfile(nickname="alice", email="a@example.com")

        merged = profile.merged({"nickname": None, "plan": None, "email": None})

        assert merged.nickname == "alice"
        assert merged.plan is Plan.FREE
        assert merged.email is None


class TestCredentialEntry:
    def test_round_trip(self):
        entry = CredentialEntry(user=UserProfile(nickname="alice"), password_hash="abc")

        data = entry.to_dict()

        assert set(data) == {"user", "passwordHash"}
        assert CredentialEntry.from_dict(data) == entry


def test_plan_catalog_covers_every_plan():
    assert [plan.id for plan in PLAN_CATALOG] == list(Plan)
