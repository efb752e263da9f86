"""Company endpoints.

Anyone may read companies; creating, changing and deleting them requires an
administrator.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from jobly_backend.api.dependencies import ensure_admin
from jobly_backend.api.models import (
    CompanyDeletedResponse,
    CompanyEnvelope,
    CompanyListEnvelope,
    CompanyNewRequest,
    CompanyResponse,
    CompanyUpdateRequest,
)
from jobly_backend.database import CompanyRepositoryDep

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=CompanyEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_company(
    payload: CompanyNewRequest, repository: CompanyRepositoryDep
) -> CompanyEnvelope:
    company = repository.create(**payload.model_dump())
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.get("", response_model=CompanyListEnvelope)
def list_companies(
    repository: CompanyRepositoryDep,
    name: Annotated[str | None, Query()] = None,
    min_employees: Annotated[int | None, Query(alias="minEmployees", ge=0)] = None,
    max_employees: Annotated[int | None, Query(alias="maxEmployees", ge=0)] = None,
) -> CompanyListEnvelope:
    """List companies, filtered by name substring and employee range."""

    companies = repository.find_all(
        name=name, min_employees=min_employees, max_employees=max_employees
    )
    return CompanyListEnvelope(
        companies=[CompanyResponse.model_validate(company) for company in companies]
    )


@router.get("/{handle}", response_model=CompanyEnvelope)
def get_company(handle: str, repository: CompanyRepositoryDep) -> CompanyEnvelope:
    company = repository.get(handle)
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.patch(
    "/{handle}",
    response_model=CompanyEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def update_company(
    handle: str, payload: CompanyUpdateRequest, repository: CompanyRepositoryDep
) -> CompanyEnvelope:
    """Update only the fields present in the body."""

    company = repository.update(handle, payload.model_dump(exclude_unset=True))
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))


@router.delete(
    "/{handle}",
    response_model=CompanyDeletedResponse,
    dependencies=[Depends(ensure_admin)],
)
def delete_company(
    handle: str, repository: CompanyRepositoryDep
) -> CompanyDeletedResponse:
    repository.remove(handle)
    return CompanyDeletedResponse(deleted=handle)
