"""Pydantic models for company endpoints."""

from __future__ import annotations

from pydantic import Field, field_validator

from jobly_backend.api.models.base import ApiModel, ApiRequest, ApiUpdateRequest, validate_url

HANDLE_MAX_LENGTH = 25


class CompanyResponse(ApiModel):
    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyNewRequest(ApiRequest):
    """Payload for creating a company."""

    handle: str = Field(min_length=1, max_length=HANDLE_MAX_LENGTH)
    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, value: str | None) -> str | None:
        return validate_url(value)


class CompanyUpdateRequest(ApiUpdateRequest):
    """Partial update; the handle is immutable."""

    non_nullable = frozenset({"name", "description"})

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, value: str | None) -> str | None:
        return validate_url(value)


class CompanyEnvelope(ApiModel):
    company: CompanyResponse


class CompanyListEnvelope(ApiModel):
    companies: list[CompanyResponse]


class CompanyDeletedResponse(ApiModel):
    deleted: str
