"""Create companies, jobs and users tables."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_jobly_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("handle", sa.String(length=25), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("num_employees", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "num_employees >= 0", name="ck_companies_num_employees_non_negative"
        ),
        sa.PrimaryKeyConstraint("handle", name="pk_companies"),
        sa.UniqueConstraint("name", name="uq_companies_name"),
    )

    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("salary", sa.Integer(), nullable=True),
        sa.Column("equity", sa.Numeric(), nullable=True),
        sa.Column("company_handle", sa.String(length=25), nullable=False),
        sa.CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        sa.CheckConstraint("equity <= 1.0", name="ck_jobs_equity_at_most_one"),
        sa.ForeignKeyConstraint(
            ["company_handle"],
            ["companies.handle"],
            name="fk_jobs_company_handle_companies",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_jobs"),
    )
    op.create_index("ix_jobs_company_handle", "jobs", ["company_handle"])

    op.create_table(
        "users",
        sa.Column("username", sa.String(length=25), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column(
            "is_admin", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        sa.PrimaryKeyConstraint("username", name="pk_users"),
    )


def downgrade() -> None:
    op.drop_table("users")
    op.drop_index("ix_jobs_company_handle", table_name="jobs")
    op.drop_table("jobs")
    op.drop_table("companies")
