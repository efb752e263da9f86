"""FastAPI dependencies for database access."""

from collections.abc import Iterator
from functools import cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from jobly_backend.database.repositories import (
    CompanyRepository,
    JobRepository,
    UserRepository,
)
from jobly_backend.database.service import DatabaseService
from jobly_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def _build_database_service(database_url: str) -> DatabaseService:
    """Create a cached :class:`DatabaseService` for the given connection string."""
    return DatabaseService(database_url)


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the cached database service instance."""
    return _build_database_service(settings.database_url)


def get_session(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> Iterator[Session]:
    """Yield a session whose transaction commits once the request succeeds."""
    with db.session() as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]


def get_company_repository(session: SessionDep) -> CompanyRepository:
    return CompanyRepository(session)


def get_job_repository(session: SessionDep) -> JobRepository:
    return JobRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


CompanyRepositoryDep = Annotated[CompanyRepository, Depends(get_company_repository)]
JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
