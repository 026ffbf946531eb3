"""Job service — business rules between the jobs router and the job store.

Rule: No FastAPI here. Pure Python business logic.
"""


import logging

from app.core.exceptions import NotFoundError
from app.core.pagination import PaginationQuery
from app.domain.job import Job
from app.repositories.base import PageResult
from app.repositories.job import JobRepository
from app.schemas.job import JobCreate, JobUpdate

logger = logging.getLogger(__name__)

class JobService:
    def __init__(self, repo: JobRepository):
        self._repo = repo

    def list_jobs(self, query: PaginationQuery) -> PageResult[Job]:
        return self._repo.list(query)

    def get_job(self, job_id: int) -> Job:
        job = self._repo.get_by_id(job_id)
        if job is None:
            raise NotFoundError("Job", job_id)
        return job

    def create_job(self, data: JobCreate) -> Job:
        job = self._repo.create(**data.model_dump())
        logger.info("Created job %d", job.id)
        return job

    def update_job(self, job_id: int, data: JobUpdate) -> Job:
        updated = self._repo.update(job_id, **data.model_dump(exclude_unset=True))
        if updated is None:
            raise NotFoundError("Job", job_id)
        logger.info("Updated job %d", job_id)
        return updated

    def delete_job(self, job_id: int) -> None:
        if not self._repo.delete(job_id):
            raise NotFoundError("Job", job_id)
        logger.info("Deleted job %d", job_id)
