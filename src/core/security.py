"""Password digest helpers.

New digests use ``werkzeug.security`` (salted and stretched). Entries written
by the browser build of the app carry an unsalted SHA-256 hex digest; those
still verify so existing accounts can sign in, and ``needs_rehash`` tells the
credential service to upgrade them.
"""

import asyncio
import hashlib
import hmac
import re

from werkzeug.security import check_password_hash, generate_password_hash

from core.config import settings

_LEGACY_SHA256 = re.compile(r"^[0-9a-f]{64}$")


def _legacy_sha256(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def is_legacy_digest(password_hash: str) -> bool:
    """Return True for unsalted SHA-256 hex digests."""
    return bool(_LEGACY_SHA256.match(password_hash))


class PasswordHasher:
    """Hash and verify passwords off the event loop."""

    def __init__(self, method: str = settings.password_hash_method) -> None:
        self._method = method

    def hash_sync(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify_sync(self, password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        if is_legacy_digest(password_hash):
            return hmac.compare_digest(_legacy_sha256(password), password_hash)
        try:
            return check_password_hash(password_hash, password)
        except ValueError:
            # Unknown or corrupt hash format
            return False

    async def hash(self, password: str) -> str:
        """Digest a password."""
        return await asyncio.to_thread(self.hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored digest."""
        return await asyncio.to_thread(self.verify_sync, password, password_hash)

    def needs_rehash(self, password_hash: str) -> bool:
        """True when the stored digest predates the current hashing scheme."""
        return is_legacy_digest(password_hash) or not password_hash.startswith(
            self._method.split(":", 1)[0]
        )
