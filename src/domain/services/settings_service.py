"""Settings record: always-defaulted user preferences."""

import json
from collections.abc import MutableSet
from dataclasses import replace
from typing import Any

import structlog

from core.config import settings as app_settings
from core.exceptions import InvalidSettingsError
from domain.entities.settings import (
    DEFAULT_SETTINGS,
    LANGUAGES_BY_CODE,
    SETTINGS_FIELD_ALIASES,
    SUPPORTED_LANGUAGES,
    Language,
    SettingsRecord,
    Theme,
)
from domain.repositories.key_value_store import IKeyValueStore

logger = structlog.get_logger()

LIGHT_THEME_CLASS = "light"


def apply_theme(theme: Theme | str, class_list: MutableSet[str]) -> None:
    """Toggle the root ``light`` CSS class for ``theme``."""
    if Theme(theme) is Theme.LIGHT:
        class_list.add(LIGHT_THEME_CLASS)
    else:
        class_list.discard(LIGHT_THEME_CLASS)


def _validate(field: str, value: Any) -> Any:
    """Return the normalized value or raise InvalidSettingsError."""
    if field == "theme":
        try:
            return Theme(value)
        except ValueError:
            raise InvalidSettingsError(field, value) from None
    if field in ("language", "target_language"):
        if not isinstance(value, str) or value not in LANGUAGES_BY_CODE:
            raise InvalidSettingsError(field, value)
        return value
    if field == "notifications":
        if not isinstance(value, bool):
            raise InvalidSettingsError(field, value)
        return value
    raise InvalidSettingsError(field, value)


class SettingsService:
    """Reads and writes the settings record under a single key."""

    def __init__(self, store: IKeyValueStore, key: str = app_settings.settings_key) -> None:
        self._store = store
        self._key = key

    async def get(self) -> SettingsRecord:
        """Stored values merged over the defaults. Never raises."""
        raw = await self._store.get_item(self._key)
        if raw is None:
            return DEFAULT_SETTINGS
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("settings_record_corrupt", key=self._key)
            return DEFAULT_SETTINGS
        if not isinstance(data, dict):
            logger.warning("settings_record_corrupt", key=self._key)
            return DEFAULT_SETTINGS

        stored = {
            SETTINGS_FIELD_ALIASES[name]: value
            for name, value in data.items()
            if name in SETTINGS_FIELD_ALIASES
        }
        try:
            return replace(
                DEFAULT_SETTINGS,
                **{field: _validate(field, value) for field, value in stored.items()},
            )
        except InvalidSettingsError:
            logger.warning("settings_record_invalid", key=self._key)
            return DEFAULT_SETTINGS

    async def save(self, **updates: Any) -> SettingsRecord:
        """Merge ``updates`` over the current record and persist the full result.

        Accepts attribute names (``target_language``) or persisted names
        (``targetLanguage``). ``save()`` with no arguments returns the current
        record unchanged.
        """
        normalized: dict[str, Any] = {}
        for name, value in updates.items():
            field = SETTINGS_FIELD_ALIASES.get(name, name)
            normalized[field] = _validate(field, value)

        current = await self.get()
        updated = replace(current, **normalized)
        await self._store.set_item(self._key, json.dumps(updated.to_dict()))
        if normalized:
            logger.info("settings_saved", fields=sorted(normalized))
        return updated

    @staticmethod
    def supported_languages() -> tuple[Language, ...]:
        return SUPPORTED_LANGUAGES

    @staticmethod
    def get_language(code: str) -> Language | None:
        return LANGUAGES_BY_CODE.get(code)
