"""Cross-cutting helpers shared by the database and API layers."""

from jobly_backend.shared.errors import (
    AppError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from jobly_backend.shared.sql import (
    PartialUpdate,
    WhereClause,
    like_pattern,
    sql_for_partial_update,
)

__all__ = [
    "AppError",
    "BadRequestError",
    "ForbiddenError",
    "NotFoundError",
    "PartialUpdate",
    "UnauthorizedError",
    "WhereClause",
    "like_pattern",
    "sql_for_partial_update",
]
