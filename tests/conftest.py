"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from jobly_backend.api import create_api
from jobly_backend.api.services import AuthService
from jobly_backend.database import (
    BaseSchema,
    CompanyRepository,
    DatabaseService,
    JobRepository,
    UserRepository,
    get_database,
)
from jobly_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy.orm import Session

TEST_SECRET_KEY = "test-secret-key"  # noqa: S105

COMPANIES = [
    {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 100,
        "logo_url": "http://c1.img",
    },
    {
        "handle": "c2",
        "name": "C2",
        "description": "Desc2",
        "num_employees": 200,
        "logo_url": "http://c2.img",
    },
    {
        "handle": "c3",
        "name": "C3",
        "description": "Desc3",
        "num_employees": 300,
        "logo_url": "http://c3.img",
    },
]

JOBS = [
    {"title": "j1", "salary": 100_000, "equity": 0.1, "company_handle": "c1"},
    {"title": "j2", "salary": 200_000, "equity": 0.2, "company_handle": "c2"},
    {"title": "j3", "salary": 300_000, "equity": 0, "company_handle": "c3"},
]

USERS = [
    {
        "username": "u1",
        "password": "password1",
        "first_name": "U1F",
        "last_name": "U1L",
        "email": "user1@user.com",
        "is_admin": False,
    },
    {
        "username": "u2",
        "password": "password2",
        "first_name": "U2F",
        "last_name": "U2L",
        "email": "user2@user.com",
        "is_admin": True,
    },
    {
        "username": "u3",
        "password": "password3",
        "first_name": "U3F",
        "last_name": "U3L",
        "email": "user3@user.com",
        "is_admin": False,
    },
]


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("AUTH_SECRET_KEY", TEST_SECRET_KEY)
    monkeypatch.setenv("PASSWORD_HASH_ITERATIONS", "1000")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def auth_service() -> AuthService:
    return AuthService(settings=get_settings())


def seed(session: Session, auth_service: AuthService) -> None:
    """Insert the companies, jobs and users shared by the tests."""
    companies = CompanyRepository(session)
    for company in COMPANIES:
        companies.create(**company)
    jobs = JobRepository(session)
    for job in JOBS:
        jobs.create(**job)
    for user in USERS:
        auth_service.register_user(session=session, data=user, is_admin=user["is_admin"])


@pytest.fixture
def database(tmp_path: Path, auth_service: AuthService) -> Iterator[DatabaseService]:
    """Fresh SQLite database file with the seed data committed."""
    service = DatabaseService(f"sqlite:///{tmp_path / 'jobly.db'}")
    BaseSchema.metadata.create_all(service.engine)
    with service.session() as session:
        seed(session, auth_service)
    yield service
    service.dispose()


@pytest.fixture
def session(database: DatabaseService) -> Iterator[Session]:
    with database.session() as db_session:
        yield db_session


@pytest.fixture
def client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api()
    app.dependency_overrides[get_database] = lambda: database
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def u1_token(auth_service: AuthService) -> str:
    return auth_service.create_token({"username": "u1", "is_admin": False})


@pytest.fixture
def admin_token(auth_service: AuthService) -> str:
    return auth_service.create_token({"username": "u2", "is_admin": True})


@pytest.fixture
def u1_headers(u1_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {u1_token}"}


@pytest.fixture
def admin_headers(admin_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}
