"""Pydantic schemas for settings, languages and plans."""

from pydantic import BaseModel, ConfigDict

from domain.entities.settings import Theme
from domain.entities.user import Plan


class SettingsResponse(BaseModel):
    """Full settings record."""

    model_config = ConfigDict(from_attributes=True)

    theme: Theme
    language: str
    target_language: str
    notifications: bool


class SettingsDetailResponse(BaseModel):
    data: SettingsResponse


class SettingsUpdate(BaseModel):
    """Partial settings update. Values are validated by the settings service."""

    theme: str | None = None
    language: str | None = None
    target_language: str | None = None
    notifications: bool | None = None


class LanguageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    flag: str


class LanguageListResponse(BaseModel):
    data: list[LanguageResponse]


class PlanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Plan
    name: str
    price: str


class PlanListResponse(BaseModel):
    data: list[PlanResponse]
