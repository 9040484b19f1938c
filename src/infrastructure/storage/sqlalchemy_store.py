"""SQLAlchemy implementation of the key-value store."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.models import KeyValueModel


class SQLAlchemyKeyValueStore:
    """SQLAlchemy implementation of IKeyValueStore.

    Each call opens its own session and commits before returning.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_item(self, key: str) -> str | None:
        """Get the value stored under a key."""
        async with self._session_factory() as session:
            stmt = select(KeyValueModel.value).where(KeyValueModel.key == key)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def set_item(self, key: str, value: str) -> None:
        """Insert or replace the value under a key."""
        async with self._session_factory() as session:
            model = await session.get(KeyValueModel, key)
            if model is None:
                session.add(KeyValueModel(key=key, value=value))
            else:
                model.value = value
            await session.commit()

    async def remove_item(self, key: str) -> None:
        """Delete a key if present."""
        async with self._session_factory() as session:
            await session.execute(delete(KeyValueModel).where(KeyValueModel.key == key))
            await session.commit()
