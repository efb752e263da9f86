"""Database connectivity helpers, table schemas and repositories."""

from jobly_backend.database.base import BaseSchema
from jobly_backend.database.dependencies import (
    CompanyRepositoryDep,
    JobRepositoryDep,
    SessionDep,
    UserRepositoryDep,
    get_database,
    get_session,
)
from jobly_backend.database.repositories import (
    CompanyRepository,
    JobRepository,
    UserRepository,
)
from jobly_backend.database.schemas import CompanySchema, JobSchema, UserSchema
from jobly_backend.database.service import DatabaseService
from jobly_backend.settings import BackendSettings, get_settings, settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "CompanyRepository",
    "CompanyRepositoryDep",
    "CompanySchema",
    "DatabaseService",
    "JobRepository",
    "JobRepositoryDep",
    "JobSchema",
    "SessionDep",
    "UserRepository",
    "UserRepositoryDep",
    "UserSchema",
    "get_database",
    "get_session",
    "get_settings",
    "settings",
]
