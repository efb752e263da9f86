"""User endpoints.

Listing and creating users is reserved for administrators. A user may read,
change or delete their own record; administrators may do so for anyone.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from jobly_backend.api.dependencies import AuthServiceDep, ensure_admin, ensure_admin_or_owner
from jobly_backend.api.models import (
    UserCreatedResponse,
    UserDeletedResponse,
    UserEnvelope,
    UserListEnvelope,
    UserNewRequest,
    UserResponse,
    UserUpdateRequest,
)
from jobly_backend.database import SessionDep, UserRepositoryDep

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_user(
    payload: UserNewRequest,
    session: SessionDep,
    auth_service: AuthServiceDep,
) -> UserCreatedResponse:
    """Create a user (admins included) and return a token for them."""

    user, token = auth_service.register_user(
        session=session, data=payload.model_dump(), is_admin=payload.is_admin
    )
    return UserCreatedResponse(user=UserResponse.model_validate(user), token=token)


@router.get(
    "",
    response_model=UserListEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def list_users(repository: UserRepositoryDep) -> UserListEnvelope:
    users = repository.find_all()
    return UserListEnvelope(users=[UserResponse.model_validate(user) for user in users])


@router.get(
    "/{username}",
    response_model=UserEnvelope,
    dependencies=[Depends(ensure_admin_or_owner)],
)
def get_user(username: str, repository: UserRepositoryDep) -> UserEnvelope:
    user = repository.get(username)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.patch(
    "/{username}",
    response_model=UserEnvelope,
    dependencies=[Depends(ensure_admin_or_owner)],
)
def update_user(
    username: str,
    payload: UserUpdateRequest,
    session: SessionDep,
    auth_service: AuthServiceDep,
) -> UserEnvelope:
    user = auth_service.update_user(
        session=session, username=username, data=payload.model_dump(exclude_unset=True)
    )
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete(
    "/{username}",
    response_model=UserDeletedResponse,
    dependencies=[Depends(ensure_admin_or_owner)],
)
def delete_user(username: str, repository: UserRepositoryDep) -> UserDeletedResponse:
    repository.remove(username)
    return UserDeletedResponse(deleted=username)
