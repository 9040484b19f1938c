"""Settings, language and plan API routes."""

from fastapi import APIRouter, Depends

from api.v1.dependencies import get_settings_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.settings import (
    LanguageListResponse,
    LanguageResponse,
    PlanListResponse,
    PlanResponse,
    SettingsDetailResponse,
    SettingsResponse,
    SettingsUpdate,
)
from domain.entities.user import PLAN_CATALOG
from domain.services.settings_service import SettingsService

router = APIRouter(prefix="/settings", tags=["settings"])
plans_router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("", response_model=SettingsDetailResponse, summary="Get settings")
async def get_settings(
    service: SettingsService = Depends(get_settings_service),
) -> SettingsDetailResponse:
    """Get the settings record, with defaults filled in."""
    record = await service.get()
    return SettingsDetailResponse(data=SettingsResponse.model_validate(record))


@router.patch(
    "",
    response_model=SettingsDetailResponse,
    summary="Update settings",
    responses={400: {"model": ErrorResponse, "description": "Unsupported theme or language"}},
)
async def update_settings(
    body: SettingsUpdate,
    service: SettingsService = Depends(get_settings_service),
) -> SettingsDetailResponse:
    """Merge the given fields into the current settings."""
    record = await service.save(**body.model_dump(exclude_none=True))
    return SettingsDetailResponse(data=SettingsResponse.model_validate(record))


@router.get(
    "/languages",
    response_model=LanguageListResponse,
    summary="List supported languages",
)
async def list_languages(
    service: SettingsService = Depends(get_settings_service),
) -> LanguageListResponse:
    """Languages available as source or target language."""
    return LanguageListResponse(
        data=[LanguageResponse.model_validate(lang) for lang in service.supported_languages()]
    )


@plans_router.get("", response_model=PlanListResponse, summary="List plans")
async def list_plans() -> PlanListResponse:
    """Subscription plans with display prices."""
    return PlanListResponse(data=[PlanResponse.model_validate(plan) for plan in PLAN_CATALOG])
