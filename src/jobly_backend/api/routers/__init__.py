"""Route definitions for the public HTTP endpoints."""

from jobly_backend.api.routers.auth import router as auth_router
from jobly_backend.api.routers.companies import router as companies_router
from jobly_backend.api.routers.jobs import router as jobs_router
from jobly_backend.api.routers.users import router as users_router

__all__ = ["auth_router", "companies_router", "jobs_router", "users_router"]
