"""Worker Schemas — creation payloads and public worker data.

Invariants:
    - WorkerCreate.name: 1-255 chars, stripped, non-empty
    - dateOfBirth / dateOfExpiry normalized to UTC or None
    - WorkerEnrollmentCreate keeps certification items raw: each one is
      completed with workerId and validated only after the worker exists
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from certtrack.schemas.certification import CertificationRead
from certtrack.schemas.common import CamelModel, NormalizedDateTime, UtcDateTime


class WorkerCreate(CamelModel):
    """Worker creation — the `worker` object of POST /workers."""
    name: str = Field(min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    employee_id: str | None = Field(None, max_length=100)
    position: str | None = Field(None, max_length=255)
    date_of_birth: NormalizedDateTime = None
    date_of_expiry: NormalizedDateTime = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class WorkerRead(CamelModel):
    id: int
    name: str
    email: str | None = None
    phone: str | None = None
    employee_id: str | None = None
    position: str | None = None
    date_of_birth: UtcDateTime | None = None
    date_of_expiry: UtcDateTime | None = None
    created_at: UtcDateTime


class WorkerEnrollmentCreate(BaseModel):
    """POST /workers body: a worker plus the certifications it already holds."""
    worker: dict[str, Any]
    certifications: list[dict[str, Any]] | None = None


class WorkerEnrollmentRead(BaseModel):
    worker: WorkerRead
    certifications: list[CertificationRead]
