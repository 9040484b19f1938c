"""Key-value store protocol."""

from typing import Protocol


class IKeyValueStore(Protocol):
    """Durable string key -> string value storage.

    No transactions and no expiry: each call is applied on its own and the
    last write to a key wins.
    """

    async def get_item(self, key: str) -> str | None:
        """Get the value stored under a key, or None if absent."""
        ...

    async def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        ...

    async def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        ...
