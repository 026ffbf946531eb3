"""
Tests for seeding the in-memory store from disk.
"""

import json

import pytest
from pydantic import ValidationError

from app.db.seed import build_job_repository, load_seed_jobs


def test_load_seed_jobs(seed_file):
    jobs = load_seed_jobs(seed_file)

    assert [job.id for job in jobs] == [1, 2, 3]
    assert jobs[0].posted == "2 days ago"


def test_missing_seed_file_gives_empty_store(tmp_path):
    repo = build_job_repository(tmp_path / "nope.json")

    assert len(repo) == 0


def test_invalid_seed_record_fails(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([{"id": 1, "title": ""}]))

    with pytest.raises(ValidationError):
        load_seed_jobs(path)


def test_malformed_seed_file_fails(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json")

    with pytest.raises(json.JSONDecodeError):
        load_seed_jobs(path)


def test_repository_continues_ids_after_seed(seed_file):
    repo = build_job_repository(seed_file)

    job = repo.create(
        title="New", department="D", location="L", type="T", description="Desc"
    )

    assert job.id == 4
