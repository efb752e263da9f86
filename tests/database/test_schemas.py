"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from sqlalchemy import Table

from jobly_backend.database.schemas import CompanySchema, JobSchema, UserSchema


def test_job_company_foreign_key_cascades() -> None:
    table = cast("Table", JobSchema.__table__)
    (foreign_key,) = table.c.company_handle.foreign_keys
    assert foreign_key.column.table.name == CompanySchema.__tablename__
    assert foreign_key.ondelete == "CASCADE"


def test_company_name_is_unique() -> None:
    table = cast("Table", CompanySchema.__table__)
    assert table.c.name.unique


def test_user_is_keyed_by_username_and_defaults_to_non_admin() -> None:
    table = cast("Table", UserSchema.__table__)
    assert [column.name for column in table.primary_key] == ["username"]
    assert table.c.is_admin.server_default is not None
