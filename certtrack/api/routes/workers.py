"""Worker Routes — list workers, create a worker with its certifications.

Invariants:
    - POST returns 201 with {worker, certifications}
    - Validation of the nested payload happens in the enrollment service,
      step by step, after the worker row exists
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from certtrack.infrastructure.database import get_db
from certtrack.schemas.worker import (
    WorkerEnrollmentCreate, WorkerEnrollmentRead, WorkerRead,
)
from certtrack.services.enrollment import enroll_worker
from certtrack.services.store import CertificationStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/workers", tags=["workers"])


@router.get("", response_model=list[WorkerRead])
async def list_workers(db: AsyncSession = Depends(get_db)):
    """Return all workers."""
    return await CertificationStore(db).list_workers()


@router.post(
    "", response_model=WorkerEnrollmentRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_worker(
    body: WorkerEnrollmentCreate, db: AsyncSession = Depends(get_db),
):
    """Create a worker and, in order, each of its certifications."""
    return await enroll_worker(CertificationStore(db), body)
