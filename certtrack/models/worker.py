"""Worker ORM — a person who can hold certifications.

Invariants:
    - id is an integer primary key assigned by the store
    - name is non-nullable
    - date_of_birth / date_of_expiry are stored as UTC date-times or NULL

Design Decisions:
    - date_of_expiry kept as-is: stored and returned, no business rule reads it
    - No relationship() to certifications: routes never load a worker's
      certifications through the ORM
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from certtrack.db.base import Base


class Worker(Base):
    """Worker entity."""
    __tablename__ = "workers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    employee_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    date_of_birth: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    date_of_expiry: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
