"""Pydantic models for user endpoints."""

from __future__ import annotations

from pydantic import EmailStr, Field

from jobly_backend.api.models.auth import (
    NAME_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
)
from jobly_backend.api.models.base import ApiModel, ApiRequest, ApiUpdateRequest


class UserResponse(ApiModel):
    """Public representation of a user; the password hash never leaves the API."""

    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserNewRequest(ApiRequest):
    """Admin-only payload for creating users, possibly admins."""

    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)
    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    is_admin: bool = False


class UserUpdateRequest(ApiUpdateRequest):
    """Partial update of a user's profile or password."""

    non_nullable = frozenset({"password", "first_name", "last_name", "email"})

    password: str | None = Field(
        default=None, min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    first_name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr | None = None


class UserEnvelope(ApiModel):
    user: UserResponse


class UserCreatedResponse(ApiModel):
    user: UserResponse
    token: str


class UserListEnvelope(ApiModel):
    users: list[UserResponse]


class UserDeletedResponse(ApiModel):
    deleted: str
