"""Sign-up, sign-in and session API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import OptionalUser
from api.v1.dependencies import get_credential_service
from api.v1.schemas.auth import (
    SessionResponse,
    SignInRequest,
    SignUpRequest,
    UserDetailResponse,
    UserResponse,
)
from api.v1.schemas.common import ErrorResponse
from core.rate_limit import limiter
from domain.services.credential_service import CredentialService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=UserDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        201: {"description": "Account created and signed in"},
        400: {"model": ErrorResponse, "description": "Password too short"},
        409: {"model": ErrorResponse, "description": "Nickname already taken"},
    },
)
@limiter.limit("5/minute")  # type: ignore[untyped-decorator]
async def sign_up(
    request: Request,
    body: SignUpRequest,
    service: CredentialService = Depends(get_credential_service),
) -> UserDetailResponse:
    """Register a new account. Nicknames are unique regardless of case."""
    user = await service.register(body.nickname, body.password)
    return UserDetailResponse(data=UserResponse.model_validate(user))


@router.post(
    "/signin",
    response_model=UserDetailResponse,
    summary="Sign in",
    responses={401: {"model": ErrorResponse, "description": "Invalid nickname or password"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def sign_in(
    request: Request,
    body: SignInRequest,
    service: CredentialService = Depends(get_credential_service),
) -> UserDetailResponse:
    """Verify credentials and start a session."""
    user = await service.authenticate(body.nickname, body.password)
    return UserDetailResponse(data=UserResponse.model_validate(user))


@router.post(
    "/signout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Sign out",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def sign_out(
    request: Request,
    service: CredentialService = Depends(get_credential_service),
) -> None:
    """Clear the current session. Signing out twice is harmless."""
    await service.sign_out()
    return None


@router.get(
    "/session",
    response_model=SessionResponse,
    summary="Get the current session",
)
async def get_session(user: OptionalUser) -> SessionResponse:
    """Return the signed-in user, or ``data: null``."""
    return SessionResponse(data=UserResponse.model_validate(user) if user else None)
