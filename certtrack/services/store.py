"""Certification Store — select/insert access to workers, courses, certifications.

Invariants:
    - Every add_* inserts exactly one row, commits, and returns the refreshed row
    - IntegrityError never escapes: unique violations become DuplicateEntryError,
      anything else becomes DatabaseError
    - Expiry filtering is done in SQL (expiry_date <= cutoff; NULL never matches)

Design Decisions:
    - One commit per insert: nested worker creation is sequential and
      non-atomic, earlier rows stay persisted when a later insert fails
    - Unique violation detected from SQLSTATE 23505 (asyncpg/psycopg) or the
      SQLite message, in this module only
"""

import logging
from datetime import datetime
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from certtrack.core.dates import as_utc
from certtrack.core.errors import DatabaseError, DuplicateEntryError, ErrorContext
from certtrack.db.base import Base
from certtrack.models import Certification, Course, Worker

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION = "23505"

RowT = TypeVar("RowT", bound=Base)


def _is_unique_violation(error: IntegrityError) -> bool:
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == _UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


class CertificationStore:
    """Table access over a single AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ──────────────────────────────────────────────────

    async def list_workers(self) -> list[Worker]:
        result = await self.db.execute(select(Worker).order_by(Worker.id))
        return list(result.scalars().all())

    async def list_courses(self) -> list[Course]:
        result = await self.db.execute(select(Course).order_by(Course.id))
        return list(result.scalars().all())

    async def list_certifications(self) -> list[Certification]:
        result = await self.db.execute(
            select(Certification).order_by(Certification.id),
        )
        return list(result.scalars().all())

    async def list_certifications_expiring_by(
        self, cutoff: datetime,
    ) -> list[Certification]:
        result = await self.db.execute(
            select(Certification)
            .where(Certification.expiry_date <= as_utc(cutoff))
            .order_by(Certification.expiry_date, Certification.id),
        )
        return list(result.scalars().all())

    # ─── Writes ─────────────────────────────────────────────────

    async def add_worker(self, data: dict) -> Worker:
        return await self._insert(Worker(**data))

    async def add_course(self, data: dict) -> Course:
        return await self._insert(Course(**data))

    async def add_certification(self, data: dict) -> Certification:
        return await self._insert(Certification(**data))

    async def _insert(self, row: RowT) -> RowT:
        table = row.__tablename__
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            context = ErrorContext(table=table)
            if _is_unique_violation(e):
                logger.warning(
                    f"Unique constraint violated on {table}",
                    extra={"table": table, "error_code": "DUPLICATE_ENTRY"},
                )
                raise DuplicateEntryError(str(e.orig), context=context) from e
            logger.error(f"DB integrity error on {table}: {e}")
            raise DatabaseError(
                "Integrity constraint violated", "insert", context=context,
            ) from e
        await self.db.refresh(row)
        logger.info(
            f"Inserted into {table}",
            extra={"table": table, "record_id": row.id},
        )
        return row
