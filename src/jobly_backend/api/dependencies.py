"""Dependency providers for FastAPI routers.

Authentication happens in two steps. :func:`authenticate_jwt` runs for every
request and attaches the verified token payload to ``request.state.user``;
a missing or invalid token is not an error at that stage. The ``ensure_*``
guards then decide whether the caller may proceed.
"""

from __future__ import annotations

import logging
from typing import Annotated

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobly_backend.api.services import AuthService, TokenPayload
from jobly_backend.database.dependencies import SettingsDep
from jobly_backend.shared import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)

ADMIN_REQUIRED_MESSAGE = "Unauthorized, admin privileges required"
ADMIN_OR_OWNER_REQUIRED_MESSAGE = "Unauthorized, admin or the user themselves required"


def get_auth_service(settings: SettingsDep) -> AuthService:
    """Return an :class:`AuthService` bound to the current settings."""

    return AuthService(settings=settings)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def authenticate_jwt(
    request: Request,
    auth_service: AuthServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
) -> TokenPayload | None:
    """Attach the bearer token's claims to the request if the token is valid."""

    request.state.user = None
    if credentials is None:
        return None
    try:
        user = auth_service.decode_token(credentials.credentials.strip())
    except jwt.InvalidTokenError as exc:
        logger.debug("Ignoring invalid bearer token: %s", exc)
        return None
    request.state.user = user
    return user


CurrentUserDep = Annotated[TokenPayload | None, Depends(authenticate_jwt)]


def ensure_logged_in(user: CurrentUserDep) -> TokenPayload:
    """Require an authenticated caller."""

    if user is None:
        raise UnauthorizedError
    return user


def ensure_admin(user: CurrentUserDep) -> TokenPayload:
    """Require an authenticated administrator."""

    if user is None or not user.is_admin:
        raise ForbiddenError(ADMIN_REQUIRED_MESSAGE)
    return user


def ensure_admin_or_owner(
    username: str,
    user: Annotated[TokenPayload, Depends(ensure_logged_in)],
) -> TokenPayload:
    """Require an administrator or the user named by the ``username`` path parameter."""

    if not (user.is_admin or user.username == username):
        raise ForbiddenError(ADMIN_OR_OWNER_REQUIRED_MESSAGE)
    return user


__all__ = [
    "ADMIN_OR_OWNER_REQUIRED_MESSAGE",
    "ADMIN_REQUIRED_MESSAGE",
    "AuthServiceDep",
    "CurrentUserDep",
    "authenticate_jwt",
    "ensure_admin",
    "ensure_admin_or_owner",
    "ensure_logged_in",
    "get_auth_service",
]
