"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.job import Job
from app.main import create_app
from app.repositories.job import JobRepository


def make_job(job_id: int, title: str, **overrides: Any) -> Job:
    fields = {
        "department": "Engineering",
        "location": "Remote",
        "type": "Full-time",
        "description": f"Job {title}",
        "posted": "2 days ago",
    }
    fields.update(overrides)
    return Job(id=job_id, title=title, **fields)


@pytest.fixture(name="make_job")
def make_job_fixture():
    """Factory for Job records with sensible defaults."""
    return make_job


@pytest.fixture
def seed_records()-> List[Dict[str, Any]]:
    """Seed file content for the API tests."""
    return [
        {
            "id": 1,
            "title": "Backend Engineer",
            "department": "Engineering",
            "location": "Remote",
            "type": "Full-time",
            "description": "Build APIs.",
            "posted": "2 days ago",
        },
        {
            "id": 2,
            "title": "Product Designer",
            "department": "Design",
            "location": "London",
            "type": "Full-time",
            "description": "Design things.",
            "posted": "3 days ago",
        },
        {
            "id": 3,
            "title": "Data Analyst",
            "department": "Data",
            "location": "Manchester",
            "type": "Contract",
            "description": "Analyse things.",
            "posted": "1 week ago",
        },
    ]


@pytest.fixture
def seed_file(tmp_path, seed_records) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(seed_records))
    return path


@pytest.fixture
def settings(seed_file) -> Settings:
    return Settings(
        app_env="test",
        seed_data_path=str(seed_file),
        auth_tokens={"admin-token": "admin", "user-token": "user"},
    )


@pytest.fixture
def client(settings):
    """Test client over a freshly seeded app."""
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": "Bearer admin-token"}


@pytest.fixture
def user_headers() -> Dict[str, str]:
    return {"Authorization": "Bearer user-token"}


@pytest.fixture
def abc_repo() -> JobRepository:
    """Store holding titles A, B, C created through the repository."""
    repo = JobRepository()
    for title in ("A", "B", "C"):
        repo.create(
            title=title,
            department="Engineering",
            location="Remote",
            type="Full-time",
            description=f"Job {title}",
        )
    return repo
