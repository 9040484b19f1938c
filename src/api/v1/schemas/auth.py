"""Pydantic schemas for sign-up, sign-in and profiles."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities.user import Plan


class Credentials(BaseModel):
    """Nickname/password pair."""

    nickname: str = Field(..., min_length=1, max_length=50)
    # Length policy is enforced by the credential service
    password: str = Field(..., max_length=256)

    @field_validator("nickname")
    @classmethod
    def strip_nickname(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Nickname must not be blank")
        return v


class SignUpRequest(Credentials):
    """Schema for creating an account."""


class SignInRequest(Credentials):
    """Schema for signing in."""


class UserResponse(BaseModel):
    """Public user profile."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "nickname": "alice",
                "email": "alice@example.com",
                "phone": None,
                "country": "DE",
                "avatar": None,
                "plan": "free",
                "created_at": "2026-01-28T10:00:00+00:00",
            }
        },
    )

    id: str
    nickname: str
    email: str | None = None
    phone: str | None = None
    country: str | None = None
    avatar: str | None = None
    plan: Plan
    created_at: datetime


class UserDetailResponse(BaseModel):
    """Schema for a single user."""

    data: UserResponse


class SessionResponse(BaseModel):
    """Current session; ``data`` is null when signed out."""

    data: UserResponse | None
