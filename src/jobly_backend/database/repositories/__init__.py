"""Repositories issuing parameterized SQL against the Jobly tables."""

from jobly_backend.database.repositories.company import CompanyRepository
from jobly_backend.database.repositories.job import JobRepository
from jobly_backend.database.repositories.user import UserRepository

__all__ = ["CompanyRepository", "JobRepository", "UserRepository"]
