"""Tests for :class:`CompanyRepository` against a seeded SQLite database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import text

from jobly_backend.database import CompanyRepository
from jobly_backend.shared import BadRequestError, NotFoundError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "description": "New Description",
    "num_employees": 1,
    "logo_url": "http://new.img",
}


@pytest.fixture
def repository(session: Session) -> CompanyRepository:
    return CompanyRepository(session)


def test_create(repository: CompanyRepository, session: Session) -> None:
    company = repository.create(**NEW_COMPANY)

    assert company == NEW_COMPANY
    row = session.execute(
        text("SELECT handle, name, num_employees FROM companies WHERE handle = 'new'")
    ).one()
    assert tuple(row) == ("new", "New", 1)


def test_create_duplicate_handle(repository: CompanyRepository) -> None:
    repository.create(**NEW_COMPANY)

    with pytest.raises(BadRequestError, match="Duplicate company: new"):
        repository.create(**NEW_COMPANY)


def test_create_duplicate_name(repository: CompanyRepository) -> None:
    with pytest.raises(BadRequestError, match="Duplicate company name: C1"):
        repository.create(**{**NEW_COMPANY, "name": "C1"})


def test_find_all_without_filters(repository: CompanyRepository) -> None:
    companies = repository.find_all()

    assert [company["handle"] for company in companies] == ["c1", "c2", "c3"]
    assert companies[0] == {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 100,
        "logo_url": "http://c1.img",
    }


def test_find_all_by_name_is_case_insensitive(
    repository: CompanyRepository, session: Session
) -> None:
    session.execute(
        text(
            """
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ('network-tech', 'Network Technologies', 'Tech company', 150, 'url'),
                   ('studynet', 'Study Networks', 'Educational company', 200, 'url')
            """
        )
    )

    companies = repository.find_all(name="NET")

    assert [company["handle"] for company in companies] == ["network-tech", "studynet"]


def test_find_all_by_name_treats_wildcards_literally(
    repository: CompanyRepository, session: Session
) -> None:
    session.execute(
        text(
            """
            INSERT INTO companies (handle, name, description)
            VALUES ('pct', '100% Remote', 'Remote company'),
                   ('under', 'Under_Score', 'Snake company')
            """
        )
    )

    assert [c["handle"] for c in repository.find_all(name="%")] == ["pct"]
    assert [c["handle"] for c in repository.find_all(name="r_s")] == ["under"]
    assert repository.find_all(name="c_") == []


def test_find_all_by_employee_range(repository: CompanyRepository) -> None:
    assert [c["handle"] for c in repository.find_all(min_employees=150)] == ["c2", "c3"]
    assert [c["handle"] for c in repository.find_all(max_employees=150)] == ["c1"]
    assert [
        c["handle"] for c in repository.find_all(min_employees=200, max_employees=350)
    ] == ["c2", "c3"]


def test_find_all_combines_filters(repository: CompanyRepository) -> None:
    companies = repository.find_all(name="c", min_employees=200, max_employees=250)

    assert [company["handle"] for company in companies] == ["c2"]


def test_find_all_rejects_inverted_employee_range(repository: CompanyRepository) -> None:
    with pytest.raises(
        BadRequestError, match="minEmployees cannot be greater than maxEmployees"
    ):
        repository.find_all(min_employees=300, max_employees=200)


def test_get(repository: CompanyRepository) -> None:
    assert repository.get("c1")["name"] == "C1"


def test_get_missing(repository: CompanyRepository) -> None:
    with pytest.raises(NotFoundError, match="No company: nope"):
        repository.get("nope")


def test_update(repository: CompanyRepository) -> None:
    data = {
        "name": "New",
        "description": "New Description",
        "num_employees": 10,
        "logo_url": "http://new.img",
    }

    company = repository.update("c1", data)

    assert company == {"handle": "c1", **data}
    assert repository.get("c1") == company


def test_update_only_touches_given_fields(repository: CompanyRepository) -> None:
    company = repository.update("c1", {"name": "Renamed"})

    assert company["name"] == "Renamed"
    assert company["description"] == "Desc1"
    assert company["num_employees"] == 100


def test_update_to_existing_name(repository: CompanyRepository) -> None:
    with pytest.raises(BadRequestError, match="Duplicate company name: C1"):
        repository.update("c2", {"name": "C1"})

    assert repository.get("c2")["name"] == "C2"


def test_update_keeping_own_name(repository: CompanyRepository) -> None:
    company = repository.update("c1", {"name": "C1", "description": "Same name"})

    assert company["name"] == "C1"
    assert company["description"] == "Same name"


def test_update_can_null_fields(repository: CompanyRepository) -> None:
    company = repository.update("c1", {"num_employees": None, "logo_url": None})

    assert company["num_employees"] is None
    assert company["logo_url"] is None


def test_update_missing(repository: CompanyRepository) -> None:
    with pytest.raises(NotFoundError):
        repository.update("nope", {"name": "Nope"})


def test_update_without_data(repository: CompanyRepository) -> None:
    with pytest.raises(BadRequestError, match="No data"):
        repository.update("c1", {})


def test_remove(repository: CompanyRepository, session: Session) -> None:
    repository.remove("c1")

    assert session.execute(text("SELECT handle FROM companies WHERE handle = 'c1'")).first() is None


def test_remove_cascades_to_jobs(repository: CompanyRepository, session: Session) -> None:
    repository.remove("c1")

    remaining = session.execute(
        text("SELECT id FROM jobs WHERE company_handle = 'c1'")
    ).all()
    assert remaining == []


def test_remove_missing(repository: CompanyRepository) -> None:
    with pytest.raises(NotFoundError):
        repository.remove("nope")
