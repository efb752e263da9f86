"""Authentication endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from jobly_backend.api.dependencies import AuthServiceDep
from jobly_backend.api.models import TokenResponse, UserAuthRequest, UserRegisterRequest
from jobly_backend.database import SessionDep

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenResponse)
def issue_token(
    payload: UserAuthRequest,
    session: SessionDep,
    auth_service: AuthServiceDep,
) -> TokenResponse:
    """Exchange a username and password for an access token."""

    _, token = auth_service.authenticate_user(
        session=session, username=payload.username, password=payload.password
    )
    return TokenResponse(token=token)


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    payload: UserRegisterRequest,
    session: SessionDep,
    auth_service: AuthServiceDep,
) -> TokenResponse:
    """Register a regular (non-admin) user and issue an access token."""

    _, token = auth_service.register_user(session=session, data=payload.model_dump())
    return TokenResponse(token=token)
