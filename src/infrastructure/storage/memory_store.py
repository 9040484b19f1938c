"""In-memory implementation of the key-value store."""


class InMemoryKeyValueStore:
    """Dict-backed IKeyValueStore. Contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Copy of the raw stored strings (for inspection in tests and tools)."""
        return dict(self._items)
