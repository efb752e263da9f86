"""Company table schema."""

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobly_backend.database.base import BaseSchema


class CompanySchema(BaseSchema):
    """Companies are keyed by a short, human-readable handle."""

    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="num_employees_non_negative"),
    )

    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    num_employees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
