"""Session dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends

from api.v1.dependencies import get_credential_service
from core.exceptions import NotAuthenticatedError
from domain.entities.user import UserProfile
from domain.services.credential_service import CredentialService


async def get_current_user(
    service: CredentialService = Depends(get_credential_service),
) -> UserProfile:
    """
    Dependency to get the signed-in user.

    Raises:
        NotAuthenticatedError: If no session is active
    """
    user = await service.get_current_user()
    if user is None:
        raise NotAuthenticatedError()
    return user


async def get_optional_user(
    service: CredentialService = Depends(get_credential_service),
) -> UserProfile | None:
    """Dependency to get the signed-in user, or None (no exception raised)."""
    return await service.get_current_user()


# Type alias for convenience in route handlers
CurrentUser = Annotated[UserProfile, Depends(get_current_user)]
OptionalUser = Annotated[UserProfile | None, Depends(get_optional_user)]
