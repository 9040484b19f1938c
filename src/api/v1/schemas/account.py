"""Pydantic schemas for account management."""

from pydantic import BaseModel, Field, field_validator

from domain.entities.user import Plan


class ProfileUpdate(BaseModel):
    """Schema for updating a profile. Only fields that are sent are changed."""

    nickname: str | None = Field(None, min_length=1, max_length=50)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=32)
    country: str | None = Field(None, max_length=64)
    avatar: str | None = None
    plan: Plan | None = None

    @field_validator("nickname")
    @classmethod
    def strip_nickname(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Nickname must not be blank")
        return v


class PasswordChange(BaseModel):
    """Schema for changing the password."""

    current_password: str = Field(..., max_length=256)
    new_password: str = Field(..., max_length=256)
