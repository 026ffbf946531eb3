"""Seed loading for the in-memory store and the FastAPI dependency that exposes it."""


import json
import logging
from pathlib import Path

from fastapi import Request
from pydantic import TypeAdapter

from app.domain.job import Job
from app.repositories.job import JobRepository
from app.schemas.job import JobSeed

logger = logging.getLogger(__name__)

_seed_adapter = TypeAdapter(list[JobSeed])

# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------
def load_seed_jobs(path: str | Path) -> list[Job]:
    """Read and validate job records from a JSON array on disk.

    A missing file yields an empty list; unreadable or invalid content raises.
    """
    seed_path = Path(path)
    if not seed_path.is_file():
        logger.warning("Seed file %s not found; starting with no jobs", seed_path)
        return []

    raw = json.loads(seed_path.read_text(encoding="utf-8"))
    return [Job(**seed.model_dump()) for seed in _seed_adapter.validate_python(raw)]


def build_job_repository(path: str | Path) -> JobRepository:
    repo = JobRepository(load_seed_jobs(path))
    logger.info("Loaded %d jobs from %s", len(repo), path)
    return repo

# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
def get_job_repository(request: Request) -> JobRepository:
    """Return the process-wide job store created at startup."""
    return request.app.state.job_repository
