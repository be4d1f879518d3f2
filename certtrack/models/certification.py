"""Certification ORM — a credential held by a worker.

Invariants:
    - Always belongs to a Worker (worker_id FK, enforced by the database)
    - course_id is an optional reference, not ownership
    - certificate_number is unique across all certifications
    - status is free-form, defaults to "active"

Design Decisions:
    - Unique constraint named explicitly so migrations and error logs agree
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from certtrack.db.base import Base


class Certification(Base):
    """Certification entity."""
    __tablename__ = "certifications"
    __table_args__ = (
        UniqueConstraint(
            "certificate_number", name="certifications_certificate_number_unique",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    worker_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("workers.id"), nullable=False,
    )
    course_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("courses.id"), nullable=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    certificate_number: Mapped[str] = mapped_column(String(100), nullable=False)
    issued_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    expiry_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="active",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
