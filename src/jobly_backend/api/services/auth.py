"""Authentication domain logic."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from sqlalchemy.orm import Session

from jobly_backend.database import UserRepository
from jobly_backend.settings import BackendSettings, get_settings
from jobly_backend.shared import UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class TokenPayload:
    """Claims carried by an access token."""

    username: str
    is_admin: bool = False


class AuthService:
    """Handles password hashing, token generation and credential checks."""

    def __init__(
        self,
        *,
        secret_key: str | None = None,
        algorithm: str | None = None,
        access_token_ttl_minutes: int | None = None,
        hash_iterations: int | None = None,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._secret_key = secret_key or config.auth_secret_key
        self._algorithm = algorithm or config.auth_algorithm
        self._access_token_ttl = timedelta(
            minutes=access_token_ttl_minutes or config.access_token_ttl_minutes
        )
        self._hash_iterations = hash_iterations or config.password_hash_iterations

    def hash_password(self, password: str) -> str:
        """Hash a password using PBKDF2 with a random salt."""

        salt = secrets.token_bytes(16)
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, self._hash_iterations
        )
        return f"{base64.b64encode(salt).decode()}:{base64.b64encode(digest).decode()}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Validate a password against a stored PBKDF2 hash."""

        try:
            salt_b64, hash_b64 = password_hash.split(":", 1)
        except ValueError:
            return False
        salt = base64.b64decode(salt_b64.encode())
        expected = base64.b64decode(hash_b64.encode())
        actual = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, self._hash_iterations
        )
        return hmac.compare_digest(actual, expected)

    def create_token(self, user: dict[str, Any]) -> str:
        """Sign a token for ``user`` (a repository row)."""
        issued_at = datetime.now(tz=UTC)
        payload = {
            "sub": user["username"],
            "username": user["username"],
            "isAdmin": bool(user.get("is_admin", False)),
            "iat": issued_at,
            "exp": issued_at + self._access_token_ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """Verify ``token`` and return its claims.

        Raises :class:`jwt.InvalidTokenError` (or a subclass) when the
        signature, expiry or claims are invalid.
        """
        data = jwt.decode(
            token,
            self._secret_key,
            algorithms=[self._algorithm],
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(
            username=data.get("username", data["sub"]),
            is_admin=bool(data.get("isAdmin", False)),
        )

    def register_user(
        self,
        *,
        session: Session,
        data: dict[str, Any],
        is_admin: bool = False,
    ) -> tuple[dict[str, Any], str]:
        """Create a user from validated request data and issue a token."""
        fields = {
            key: value
            for key, value in data.items()
            if key not in {"password", "is_admin"}
        }
        fields["is_admin"] = is_admin
        user = UserRepository(session).register(
            password_hash=self.hash_password(data["password"]), **fields
        )
        return user, self.create_token(user)

    def authenticate_user(
        self, *, session: Session, username: str, password: str
    ) -> tuple[dict[str, Any], str]:
        """Check credentials and issue a token."""
        user = UserRepository(session).get_credentials(username)
        if user is None or not self.verify_password(password, user.pop("password_hash")):
            logger.debug("Rejected credentials for %s", username)
            raise UnauthorizedError("Invalid username/password")
        return user, self.create_token(user)

    def update_user(
        self, *, session: Session, username: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Partially update a user, hashing a new password if supplied."""
        if data.get("password") is not None:
            data = {**data, "password": self.hash_password(data["password"])}
        return UserRepository(session).update(username, data)
