"""Certification Schemas — field-level validation for certification payloads.

Invariants:
    - workerId, name, certificateNumber are required
    - issuedDate defaults to now; null or "" also means now
    - expiryDate defaults to None
    - status defaults to "active"; null or "" also means "active"
"""

from datetime import datetime

from pydantic import Field, field_validator

from certtrack.core.dates import normalize_datetime, utc_now
from certtrack.schemas.common import CamelModel, NormalizedDateTime, UtcDateTime

DEFAULT_STATUS = "active"


class CertificationCreate(CamelModel):
    """Certification creation — POST /certifications and nested worker creation."""
    worker_id: int
    course_id: int | None = None
    name: str = Field(min_length=1, max_length=255)
    certificate_number: str = Field(min_length=1, max_length=100)
    issued_date: datetime = Field(default_factory=utc_now)
    expiry_date: NormalizedDateTime = None
    status: str = Field(DEFAULT_STATUS, max_length=50)

    @field_validator("issued_date", mode="before")
    @classmethod
    def default_issued_date(cls, v: object) -> datetime:
        return normalize_datetime(v) or utc_now()

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_STATUS
        return v

    @field_validator("name", "certificate_number")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v


class CertificationRead(CamelModel):
    id: int
    worker_id: int
    course_id: int | None = None
    name: str
    certificate_number: str
    issued_date: UtcDateTime
    expiry_date: UtcDateTime | None = None
    status: str
    created_at: UtcDateTime
