"""SQLAlchemy table schemas."""

from jobly_backend.database.schemas.company import CompanySchema
from jobly_backend.database.schemas.job import JobSchema
from jobly_backend.database.schemas.user import UserSchema

__all__ = ["CompanySchema", "JobSchema", "UserSchema"]
