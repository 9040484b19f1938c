"""Account management API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_credential_service
from api.v1.schemas.account import PasswordChange, ProfileUpdate
from api.v1.schemas.auth import UserDetailResponse, UserResponse
from api.v1.schemas.common import ErrorResponse
from core.rate_limit import limiter
from domain.services.credential_service import CredentialService

router = APIRouter(prefix="/account", tags=["account"])


@router.get("", response_model=UserDetailResponse, summary="Get my profile")
async def get_account(user: CurrentUser) -> UserDetailResponse:
    """Get the signed-in user's profile."""
    return UserDetailResponse(data=UserResponse.model_validate(user))


@router.patch(
    "",
    response_model=UserDetailResponse,
    summary="Update my profile",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid profile value"},
        409: {"model": ErrorResponse, "description": "Nickname already taken"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_account(
    request: Request,
    body: ProfileUpdate,
    user: CurrentUser,
    service: CredentialService = Depends(get_credential_service),
) -> UserDetailResponse:
    """Update profile fields. Only fields present in the body are changed."""
    updated = await service.update_profile(user.id, body.model_dump(exclude_unset=True))
    return UserDetailResponse(data=UserResponse.model_validate(updated))


@router.post(
    "/password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change my password",
    responses={
        204: {"description": "Password changed"},
        400: {"model": ErrorResponse, "description": "New password too short"},
        401: {"model": ErrorResponse, "description": "Current password is wrong"},
    },
)
@limiter.limit("5/minute")  # type: ignore[untyped-decorator]
async def change_password(
    request: Request,
    body: PasswordChange,
    user: CurrentUser,
    service: CredentialService = Depends(get_credential_service),
) -> None:
    """Replace the password after checking the current one."""
    await service.change_password(user.id, body.current_password, body.new_password)
    return None


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete my account",
    responses={204: {"description": "Account deleted and signed out"}},
)
@limiter.limit("5/minute")  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: CredentialService = Depends(get_credential_service),
) -> None:
    """Delete the signed-in account and end the session.

    No password confirmation is asked for.
    """
    await service.delete_account(user.id)
    return None
