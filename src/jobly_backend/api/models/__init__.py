"""Models used for API request and response payloads."""

from jobly_backend.api.models.auth import TokenResponse, UserAuthRequest, UserRegisterRequest
from jobly_backend.api.models.company import (
    CompanyDeletedResponse,
    CompanyEnvelope,
    CompanyListEnvelope,
    CompanyNewRequest,
    CompanyResponse,
    CompanyUpdateRequest,
)
from jobly_backend.api.models.job import (
    JobDeletedResponse,
    JobEnvelope,
    JobListEnvelope,
    JobNewRequest,
    JobResponse,
    JobUpdateRequest,
)
from jobly_backend.api.models.user import (
    UserCreatedResponse,
    UserDeletedResponse,
    UserEnvelope,
    UserListEnvelope,
    UserNewRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "CompanyDeletedResponse",
    "CompanyEnvelope",
    "CompanyListEnvelope",
    "CompanyNewRequest",
    "CompanyResponse",
    "CompanyUpdateRequest",
    "JobDeletedResponse",
    "JobEnvelope",
    "JobListEnvelope",
    "JobNewRequest",
    "JobResponse",
    "JobUpdateRequest",
    "TokenResponse",
    "UserAuthRequest",
    "UserCreatedResponse",
    "UserDeletedResponse",
    "UserEnvelope",
    "UserListEnvelope",
    "UserNewRequest",
    "UserRegisterRequest",
    "UserResponse",
    "UserUpdateRequest",
]
