"""Course Schemas."""

from pydantic import Field, field_validator

from certtrack.schemas.common import CamelModel, UtcDateTime


class CourseCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    provider: str | None = Field(None, max_length=255)
    duration_hours: int | None = Field(None, ge=0)
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class CourseRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    provider: str | None = None
    duration_hours: int | None = None
    is_active: bool
    created_at: UtcDateTime
