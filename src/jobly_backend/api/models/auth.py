"""Pydantic models for authentication endpoints."""

from __future__ import annotations

from pydantic import EmailStr, Field

from jobly_backend.api.models.base import ApiModel, ApiRequest

USERNAME_MAX_LENGTH = 25
PASSWORD_MIN_LENGTH = 5
PASSWORD_MAX_LENGTH = 20
NAME_MAX_LENGTH = 30


class UserAuthRequest(ApiRequest):
    """Payload for exchanging credentials for a token."""

    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)
    password: str = Field(min_length=1, max_length=PASSWORD_MAX_LENGTH)


class UserRegisterRequest(ApiRequest):
    """Payload for self-registration; never grants admin rights."""

    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)
    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr


class TokenResponse(ApiModel):
    token: str
