"""Repository for the ``companies`` table."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

from jobly_backend.shared import (
    BadRequestError,
    NotFoundError,
    WhereClause,
    like_pattern,
    sql_for_partial_update,
)

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"


class CompanyRepository:
    """Persistence operations for companies."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(
        self,
        *,
        handle: str,
        name: str,
        description: str,
        num_employees: int | None = None,
        logo_url: str | None = None,
    ) -> dict[str, Any]:
        """Insert a company and return it.

        Raises :class:`BadRequestError` if the handle or the name is already
        taken.
        """
        duplicate = self._session.execute(
            text("SELECT handle FROM companies WHERE handle = :handle"),
            {"handle": handle},
        ).first()
        if duplicate is not None:
            raise BadRequestError(f"Duplicate company: {handle}")
        self._ensure_unique_name(name)

        row = self._session.execute(
            text(
                f"""
                INSERT INTO companies ({COMPANY_COLUMNS})
                VALUES (:handle, :name, :description, :num_employees, :logo_url)
                RETURNING {COMPANY_COLUMNS}
                """
            ),
            {
                "handle": handle,
                "name": name,
                "description": description,
                "num_employees": num_employees,
                "logo_url": logo_url,
            },
        ).mappings().one()
        logger.info("Created company %s", handle)
        return dict(row)

    def find_all(
        self,
        *,
        name: str | None = None,
        min_employees: int | None = None,
        max_employees: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return companies ordered by name, optionally filtered.

        ``name`` is a case-insensitive substring match; the employee bounds
        are inclusive.
        """
        if (
            min_employees is not None
            and max_employees is not None
            and min_employees > max_employees
        ):
            raise BadRequestError("minEmployees cannot be greater than maxEmployees")

        where = WhereClause()
        if name is not None:
            where.add("LOWER(name) LIKE {param} ESCAPE '\\'", like_pattern(name))
        if min_employees is not None:
            where.add("num_employees >= {param}", min_employees)
        if max_employees is not None:
            where.add("num_employees <= {param}", max_employees)

        query = f"SELECT {COMPANY_COLUMNS} FROM companies{where.render()} ORDER BY name"
        rows = self._session.execute(text(query), where.params).mappings().all()
        return [dict(row) for row in rows]

    def get(self, handle: str) -> dict[str, Any]:
        """Return a company by handle or raise :class:`NotFoundError`."""
        row = self._session.execute(
            text(f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = :handle"),
            {"handle": handle},
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No company: {handle}")
        return dict(row)

    def update(self, handle: str, data: dict[str, Any]) -> dict[str, Any]:
        """Apply a partial update.

        ``data`` may contain name, description, num_employees and logo_url.
        """
        if data.get("name") is not None:
            self._ensure_unique_name(data["name"], exclude_handle=handle)
        update = sql_for_partial_update(data, {})
        handle_param = update.next_param
        row = self._session.execute(
            text(
                f"""
                UPDATE companies
                SET {update.set_cols}
                WHERE handle = :{handle_param}
                RETURNING {COMPANY_COLUMNS}
                """
            ),
            {**update.params, handle_param: handle},
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No company: {handle}")
        return dict(row)

    def remove(self, handle: str) -> None:
        row = self._session.execute(
            text("DELETE FROM companies WHERE handle = :handle RETURNING handle"),
            {"handle": handle},
        ).first()
        if row is None:
            raise NotFoundError(f"No company: {handle}")
        logger.info("Deleted company %s", handle)

    def _ensure_unique_name(self, name: str, *, exclude_handle: str | None = None) -> None:
        duplicate = self._session.execute(
            text("SELECT handle FROM companies WHERE name = :name AND handle <> :handle"),
            {"name": name, "handle": exclude_handle or ""},
        ).first()
        if duplicate is not None:
            raise BadRequestError(f"Duplicate company name: {name}")
