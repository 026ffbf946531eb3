"""Store package — seeds the in-memory job store and injects it into routes."""
from app.db.seed import build_job_repository, get_job_repository, load_seed_jobs

__all__ = ["build_job_repository", "get_job_repository", "load_seed_jobs"]
