"""Pydantic models for account API requests and responses.

Field names are camelCase on the wire (``displayName``, ``createdAt``),
matching the dashboard client; snake_case is accepted on input as well.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from accounts.application.value_objects import PublicUser, RegisteredUser

MIN_PASSWORD_LENGTH = 6
MIN_DISPLAY_NAME_LENGTH = 2


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequest(_CamelModel):
    """Request model for creating an account."""

    username: str = Field(..., description="Login identifier", min_length=1, max_length=255)
    display_name: str = Field(
        ...,
        description="Human-readable name",
        min_length=MIN_DISPLAY_NAME_LENGTH,
        max_length=255,
    )
    password: str = Field(
        ..., description="Plaintext password", min_length=MIN_PASSWORD_LENGTH
    )


class LoginRequest(_CamelModel):
    """Request model for logging in.

    No length rules: an empty value simply fails to verify.
    """

    username: str = Field(..., description="Login identifier")
    password: str = Field(..., description="Plaintext password")


class UserResponse(_CamelModel):
    """Public user fields returned by login."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Login identifier")
    display_name: str = Field(..., description="Human-readable name")

    @classmethod
    def from_domain(cls, user: PublicUser) -> UserResponse:
        return cls(id=user.id, username=user.username, display_name=user.display_name)


class RegisteredUserResponse(UserResponse):
    """Public user fields returned by signup."""

    created_at: datetime = Field(..., description="Account creation time (UTC)")

    @classmethod
    def from_domain(cls, user: RegisteredUser) -> RegisteredUserResponse:
        return cls(
            id=user.id,
            username=user.username,
            display_name=user.display_name,
            created_at=user.created_at,
        )


class SignupResponse(BaseModel):
    """Response model for a successful signup."""

    message: str
    user: RegisteredUserResponse


class LoginResponse(BaseModel):
    """Response model for a successful login."""

    message: str
    user: UserResponse
