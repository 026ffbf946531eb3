"""Job posting domain model.

This is the record held by the in-memory store:
  - integer primary key assigned by the repository, never by callers
  - `posted` is a display value ("2 days ago"), managed by the system
"""

from __future__ import annotations

from dataclasses import dataclass

JUST_POSTED = "just now"

# Fields callers may set on create / update
JOB_WRITABLE_FIELDS = ("title", "department", "location", "type", "description")

# Fields the list endpoint may sort by
JOB_SORT_FIELDS = ("id", "title", "department", "location", "type")


@dataclass
class Job:
    id: int
    title: str
    department: str
    location: str
    type: str
    description: str
    posted: str = JUST_POSTED
