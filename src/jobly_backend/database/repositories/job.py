"""Repository for the ``jobs`` table."""

from __future__ import annotations

import logging
from decimal import Decimal
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

JOB_COLUMNS = "id, title, salary, equity, company_handle"


def _to_job(row: Any) -> dict[str, Any]:
    job = dict(row)
    # SQLite hands NUMERIC back as float
    if job["equity"] is not None and not isinstance(job["equity"], Decimal):
        job["equity"] = Decimal(str(job["equity"]))
    return job


class JobRepository:
    """Persistence operations for jobs."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(
        self,
        *,
        title: str,
        company_handle: str,
        salary: int | None = None,
        equity: float | Decimal | None = None,
    ) -> dict[str, Any]:
        """Insert a job and return it with its generated id.

        Raises :class:`BadRequestError` when the company does not exist or
        already lists a job with the same title.
        """
        company = self._session.execute(
            text("SELECT handle FROM companies WHERE handle = :handle"),
            {"handle": company_handle},
        ).first()
        if company is None:
            raise BadRequestError(f"No company: {company_handle}")

        duplicate = self._session.execute(
            text(
                "SELECT id FROM jobs WHERE title = :title AND company_handle = :company_handle"
            ),
            {"title": title, "company_handle": company_handle},
        ).first()
        if duplicate is not None:
            raise BadRequestError(f"Duplicate job: {title}")

        row = self._session.execute(
            text(
                f"""
                INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES (:title, :salary, :equity, :company_handle)
                RETURNING {JOB_COLUMNS}
                """
            ),
            {
                "title": title,
                "salary": salary,
                "equity": _bind_equity(equity),
                "company_handle": company_handle,
            },
        ).mappings().one()
        logger.info("Created job %s at %s", row["id"], company_handle)
        return _to_job(row)

    def find_all(
        self,
        *,
        title: str | None = None,
        min_salary: int | None = None,
        has_equity: bool | None = None,
        company_handle: str | None = None,
    ) -> list[dict[str, Any]]:
        """Return jobs ordered by title, optionally filtered.

        ``has_equity`` only filters when true; false and None both return
        jobs regardless of equity.
        """
        where = WhereClause()
        if title is not None:
            where.add("LOWER(title) LIKE {param} ESCAPE '\\'", like_pattern(title))
        if min_salary is not None:
            where.add("salary >= {param}", min_salary)
        if has_equity:
            where.add_raw("equity > 0")
        if company_handle is not None:
            where.add("company_handle = {param}", company_handle)

        query = f"SELECT {JOB_COLUMNS} FROM jobs{where.render()} ORDER BY title, id"
        rows = self._session.execute(text(query), where.params).mappings().all()
        return [_to_job(row) for row in rows]

    def get(self, job_id: int) -> dict[str, Any]:
        row = self._session.execute(
            text(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = :id"),
            {"id": job_id},
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No job: {job_id}")
        return _to_job(row)

    def update(self, job_id: int, data: dict[str, Any]) -> dict[str, Any]:
        """Apply a partial update of title, salary and equity.

        Renaming a job to the title of another job at the same company raises
        :class:`BadRequestError`.
        """
        if data.get("title") is not None:
            duplicate = self._session.execute(
                text(
                    """
                    SELECT id FROM jobs
                    WHERE title = :title
                      AND id <> :id
                      AND company_handle = (SELECT company_handle FROM jobs WHERE id = :id)
                    """
                ),
                {"title": data["title"], "id": job_id},
            ).first()
            if duplicate is not None:
                raise BadRequestError(f"Duplicate job: {data['title']}")
        if "equity" in data:
            data = {**data, "equity": _bind_equity(data["equity"])}
        update = sql_for_partial_update(data, {})
        id_param = update.next_param
        row = self._session.execute(
            text(
                f"""
                UPDATE jobs
                SET {update.set_cols}
                WHERE id = :{id_param}
                RETURNING {JOB_COLUMNS}
                """
            ),
            {**update.params, id_param: job_id},
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No job: {job_id}")
        return _to_job(row)

    def remove(self, job_id: int) -> None:
        row = self._session.execute(
            text("DELETE FROM jobs WHERE id = :id RETURNING id"),
            {"id": job_id},
        ).first()
        if row is None:
            raise NotFoundError(f"No job: {job_id}")
        logger.info("Deleted job %s", job_id)


def _bind_equity(equity: float | Decimal | None) -> float | None:
    # sqlite3 cannot bind Decimal
    return None if equity is None else float(equity)
