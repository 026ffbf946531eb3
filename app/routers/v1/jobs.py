"""Job CRUD router.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject the job store (and the caller, for writes) via Depends
  3. Instantiate the service with the store
  4. Call service methods and wrap result in response envelope

Reads are public. Writes require an admin bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.core.pagination import PaginationParams, PaginationQuery
from app.core.response import DataResponse, ListResponse, paginated
from app.core.security import require_admin
from app.db.seed import get_job_repository
from app.domain.auth import AuthenticatedUser
from app.domain.job import JOB_SORT_FIELDS
from app.repositories.job import JobRepository
from app.schemas.common import NOT_FOUND_RESPONSES, WRITE_RESPONSES
from app.schemas.job import JobCreate, JobOut, JobUpdate
from app.services.job import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])

job_pagination = PaginationParams(JOB_SORT_FIELDS)


# ------------------------------------------------------------------
# Helper — instantiate service with the shared store
# ------------------------------------------------------------------

def _svc(repo: JobRepository) -> JobService:
    return JobService(repo)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[JobOut])
async def list_jobs(
    query: PaginationQuery = Depends(job_pagination),
    repo: JobRepository = Depends(get_job_repository),
):
    """List jobs. Sort with ?sortBy=id|title|department|location|type&order=asc|desc."""
    result = _svc(repo).list_jobs(query)
    return paginated(
        [JobOut.model_validate(j) for j in result.items],
        result.total, query,
    )


@router.post(
    "",
    response_model=DataResponse[JobOut],
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
)
async def create_job(
    body: JobCreate,
    user: AuthenticatedUser = Depends(require_admin),
    repo: JobRepository = Depends(get_job_repository),
):
    """Create a new job posting."""
    job = _svc(repo).create_job(body)
    return {"data": JobOut.model_validate(job)}


@router.get("/{job_id}", response_model=DataResponse[JobOut], responses=NOT_FOUND_RESPONSES)
async def get_job(
    job_id: int,
    repo: JobRepository = Depends(get_job_repository),
):
    job = _svc(repo).get_job(job_id)
    return {"data": JobOut.model_validate(job)}


@router.patch(
    "/{job_id}",
    response_model=DataResponse[JobOut],
    responses={**WRITE_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def update_job(
    job_id: int,
    body: JobUpdate,
    user: AuthenticatedUser = Depends(require_admin),
    repo: JobRepository = Depends(get_job_repository),
):
    """Partially update a job posting."""
    job = _svc(repo).update_job(job_id, body)
    return {"data": JobOut.model_validate(job)}


@router.delete(
    "/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**WRITE_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def delete_job(
    job_id: int,
    user: AuthenticatedUser = Depends(require_admin),
    repo: JobRepository = Depends(get_job_repository),
):
    _svc(repo).delete_job(job_id)
