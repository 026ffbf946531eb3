"""Job Pydantic schemas (request DTOs, response model, seed records)."""


from typing import Annotated

from pydantic import Field, StringConstraints, model_validator

from app.domain.job import JOB_WRITABLE_FIELDS
from app.schemas.common import CamelModel

# Non-empty after trimming; stored trimmed
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

class JobCreate(CamelModel):
    title: RequiredText
    department: RequiredText
    location: RequiredText
    type: RequiredText
    description: RequiredText

class JobUpdate(CamelModel):
    # Defaults are not validated, so only an explicit `null` is rejected
    title: RequiredText = None
    department: RequiredText = None
    location: RequiredText = None
    type: RequiredText = None
    description: RequiredText = None

    @model_validator(mode="before")
    @classmethod
    def _require_any_field(cls, data):
        if isinstance(data, dict) and not any(name in data for name in JOB_WRITABLE_FIELDS):
            raise ValueError("Request body must include at least one updatable field")
        return data

class JobOut(CamelModel):
    id: int
    title: str
    department: str
    location: str
    type: str
    description: str
    posted: str

class JobSeed(JobOut):
    """A record from the seed file; same shape as the API output."""

    id: int = Field(gt=0)
    title: RequiredText
    department: RequiredText
    location: RequiredText
    type: RequiredText
    description: RequiredText
