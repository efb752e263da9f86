"""Job endpoints.

Anyone may read jobs; posting, changing and deleting them requires an
administrator.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from jobly_backend.api.dependencies import ensure_admin
from jobly_backend.api.models import (
    JobDeletedResponse,
    JobEnvelope,
    JobListEnvelope,
    JobNewRequest,
    JobResponse,
    JobUpdateRequest,
)
from jobly_backend.database import JobRepositoryDep

# Upper bound of the serial primary key
MAX_JOB_ID = 2**31 - 1

JobId = Annotated[int, Path(ge=1, le=MAX_JOB_ID)]

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post(
    "",
    response_model=JobEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_job(payload: JobNewRequest, repository: JobRepositoryDep) -> JobEnvelope:
    job = repository.create(**payload.model_dump())
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.get("", response_model=JobListEnvelope)
def list_jobs(
    repository: JobRepositoryDep,
    title: Annotated[str | None, Query()] = None,
    min_salary: Annotated[int | None, Query(alias="minSalary", ge=0)] = None,
    has_equity: Annotated[bool | None, Query(alias="hasEquity")] = None,
    company_handle: Annotated[str | None, Query(alias="companyHandle")] = None,
) -> JobListEnvelope:
    """List jobs; ``hasEquity=true`` keeps only jobs offering equity."""

    jobs = repository.find_all(
        title=title,
        min_salary=min_salary,
        has_equity=has_equity,
        company_handle=company_handle,
    )
    return JobListEnvelope(jobs=[JobResponse.model_validate(job) for job in jobs])


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: JobId, repository: JobRepositoryDep) -> JobEnvelope:
    job = repository.get(job_id)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def update_job(
    job_id: JobId, payload: JobUpdateRequest, repository: JobRepositoryDep
) -> JobEnvelope:
    job = repository.update(job_id, payload.model_dump(exclude_unset=True))
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete(
    "/{job_id}",
    response_model=JobDeletedResponse,
    dependencies=[Depends(ensure_admin)],
)
def delete_job(job_id: JobId, repository: JobRepositoryDep) -> JobDeletedResponse:
    repository.remove(job_id)
    return JobDeletedResponse(deleted=str(job_id))
