"""Domain package — plain dataclasses held by the in-memory store.

Folder intent:
  job.py   — Job posting record and its writable / sortable field lists
  auth.py  — Authenticated caller (role only)
"""

from app.domain.auth import AuthenticatedUser, UserRole
from app.domain.job import Job

__all__ = [
    "AuthenticatedUser",
    "Job",
    "UserRole",
]
