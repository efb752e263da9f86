"""Repository for the ``users`` table."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

from jobly_backend.shared import BadRequestError, NotFoundError, sql_for_partial_update

logger = logging.getLogger(__name__)

USER_COLUMNS = "username, first_name, last_name, email, is_admin"

# Field names accepted by ``update`` that differ from the column name.
USER_COLUMN_MAP = {"password": "password_hash"}


def _to_user(row: Any) -> dict[str, Any]:
    user = dict(row)
    user["is_admin"] = bool(user["is_admin"])
    return user


class UserRepository:
    """Encapsulates persistence operations for users.

    Returned users never include the password hash, except from
    :meth:`get_credentials`.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def register(
        self,
        *,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        email: str,
        is_admin: bool = False,
    ) -> dict[str, Any]:
        """Insert a user whose password is already hashed."""
        duplicate = self._session.execute(
            text("SELECT username FROM users WHERE username = :username"),
            {"username": username},
        ).first()
        if duplicate is not None:
            raise BadRequestError(f"Duplicate username: {username}")

        row = self._session.execute(
            text(
                f"""
                INSERT INTO users
                    (username, password_hash, first_name, last_name, email, is_admin)
                VALUES
                    (:username, :password_hash, :first_name, :last_name, :email, :is_admin)
                RETURNING {USER_COLUMNS}
                """
            ),
            {
                "username": username,
                "password_hash": password_hash,
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "is_admin": is_admin,
            },
        ).mappings().one()
        logger.info("Registered user %s (admin=%s)", username, is_admin)
        return _to_user(row)

    def get_credentials(self, username: str) -> dict[str, Any] | None:
        """Return the user together with ``password_hash``, or None."""
        row = self._session.execute(
            text(f"SELECT {USER_COLUMNS}, password_hash FROM users WHERE username = :username"),
            {"username": username},
        ).mappings().first()
        return None if row is None else _to_user(row)

    def find_all(self) -> list[dict[str, Any]]:
        rows = self._session.execute(
            text(f"SELECT {USER_COLUMNS} FROM users ORDER BY username")
        ).mappings().all()
        return [_to_user(row) for row in rows]

    def get(self, username: str) -> dict[str, Any]:
        row = self._session.execute(
            text(f"SELECT {USER_COLUMNS} FROM users WHERE username = :username"),
            {"username": username},
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No user: {username}")
        return _to_user(row)

    def update(self, username: str, data: dict[str, Any]) -> dict[str, Any]:
        """Apply a partial update.

        ``data`` may hold first_name, last_name, email, is_admin and
        ``password``; the latter must already be hashed and is written to
        the ``password_hash`` column.
        """
        update = sql_for_partial_update(data, USER_COLUMN_MAP)
        username_param = update.next_param
        row = self._session.execute(
            text(
                f"""
                UPDATE users
                SET {update.set_cols}
                WHERE username = :{username_param}
                RETURNING {USER_COLUMNS}
                """
            ),
            {**update.params, username_param: username},
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No user: {username}")
        return _to_user(row)

    def remove(self, username: str) -> None:
        row = self._session.execute(
            text("DELETE FROM users WHERE username = :username RETURNING username"),
            {"username": username},
        ).first()
        if row is None:
            raise NotFoundError(f"No user: {username}")
        logger.info("Deleted user %s", username)
