"""Pydantic models for job endpoints."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from jobly_backend.api.models.base import ApiModel, ApiRequest, ApiUpdateRequest


class JobResponse(ApiModel):
    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None
    company_handle: str


class JobNewRequest(ApiRequest):
    """Payload for posting a job."""

    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdateRequest(ApiUpdateRequest):
    """Partial update; the id and company are immutable."""

    non_nullable = frozenset({"title"})

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)


class JobEnvelope(ApiModel):
    job: JobResponse


class JobListEnvelope(ApiModel):
    jobs: list[JobResponse]


class JobDeletedResponse(ApiModel):
    deleted: str
