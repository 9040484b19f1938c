"""Unit tests for PasswordHasher."""

import hashlib

from core.security import PasswordHasher, is_legacy_digest


class TestPasswordHasher:
    async def test_hash_and_verify(self, hasher: PasswordHasher):
        digest = await hasher.hash("password1")

        assert digest != "password1"
        assert await hasher.verify("password1", digest) is True
        assert await hasher.verify("password2", digest) is False

    async def test_hashes_are_salted(self, hasher: PasswordHasher):
        assert await hasher.hash("password1") != await hasher.hash("password1")

    def test_legacy_sha256_verifies(self, hasher: PasswordHasher):
        legacy = hashlib.sha256(b"password1").hexdigest()

        assert is_legacy_digest(legacy)
        assert hasher.verify_sync("password1", legacy) is True
        assert hasher.verify_sync("password2", legacy) is False

    def test_garbage_hash_does_not_verify(self, hasher: PasswordHasher):
        assert hasher.verify_sync("password1", "") is False
        assert hasher.verify_sync("password1", "not-a-hash") is False
        assert hasher.verify_sync("password1", "bogus:method$salt$value") is False

    def test_needs_rehash(self, hasher: PasswordHasher):
        current = hasher.hash_sync("password1")
        legacy = hashlib.sha256(b"password1").hexdigest()

        assert hasher.needs_rehash(current) is False
        assert hasher.needs_rehash(legacy) is True
        assert PasswordHasher(method="scrypt").needs_rehash(current) is True
