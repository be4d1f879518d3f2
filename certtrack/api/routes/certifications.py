"""Certification Routes — list, create, and look up expiring certifications.

Invariants:
    - /certifications/expiring/{days}: cutoff = now + days; only rows with a
      non-null expiryDate <= cutoff are returned (already expired included)
    - {days} must be an integer within +-MAX_WINDOW_DAYS; anything else is a
      validation error (400)
    - POST normalizes issuedDate (default now) and expiryDate (default None)
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from certtrack.core.dates import MAX_WINDOW_DAYS, cutoff_after_days
from certtrack.infrastructure.database import get_db
from certtrack.schemas.certification import CertificationCreate, CertificationRead
from certtrack.services.store import CertificationStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/certifications", tags=["certifications"])


@router.get("", response_model=list[CertificationRead])
async def list_certifications(db: AsyncSession = Depends(get_db)):
    """Return all certifications."""
    return await CertificationStore(db).list_certifications()


@router.get("/expiring/{days}", response_model=list[CertificationRead])
async def list_expiring_certifications(
    days: int = Path(ge=-MAX_WINDOW_DAYS, le=MAX_WINDOW_DAYS),
    db: AsyncSession = Depends(get_db),
):
    """Return certifications expiring within `days` days from now."""
    cutoff = cutoff_after_days(days)
    return await CertificationStore(db).list_certifications_expiring_by(cutoff)


@router.post(
    "", response_model=CertificationRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_certification(
    body: CertificationCreate, db: AsyncSession = Depends(get_db),
):
    """Create a single certification for an existing worker."""
    return await CertificationStore(db).add_certification(body.model_dump())
