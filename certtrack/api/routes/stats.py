"""Stats Route — dashboard counters over all three tables."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from certtrack.core.stats import compute_stats
from certtrack.infrastructure.database import get_db
from certtrack.schemas.stats import StatsRead
from certtrack.services.store import CertificationStore

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsRead)
async def get_stats(db: AsyncSession = Depends(get_db)):
    """Totals plus certifications expiring within 30 days."""
    store = CertificationStore(db)
    workers = await store.list_workers()
    courses = await store.list_courses()
    certifications = await store.list_certifications()
    return compute_stats(workers, courses, certifications)
