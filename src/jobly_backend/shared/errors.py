"""Application errors mapped onto HTTP status codes."""

from __future__ import annotations

from http import HTTPStatus

ErrorMessage = str | list[str]


class AppError(Exception):
    """Base error carrying a client-facing message and an HTTP status."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: ErrorMessage | None = None) -> None:
        if message is None:
            message = HTTPStatus(self.status_code).phrase
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, dict[str, ErrorMessage | int]]:
        """Render the ``{"error": {"message", "status"}}`` response body."""
        return {"error": {"message": self.message, "status": int(self.status_code)}}


class BadRequestError(AppError):
    """400: the request is malformed or conflicts with stored data."""

    status_code = HTTPStatus.BAD_REQUEST


class UnauthorizedError(AppError):
    """401: the caller is not authenticated."""

    status_code = HTTPStatus.UNAUTHORIZED


class ForbiddenError(AppError):
    """403: the caller is authenticated but lacks the required role."""

    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(AppError):
    """404: the addressed resource does not exist."""

    status_code = HTTPStatus.NOT_FOUND


__all__ = [
    "AppError",
    "BadRequestError",
    "ErrorMessage",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
]
