"""Dashboard Stats — pure counting over already-loaded rows.

Invariants:
    - No IO, no DB: callers load the rows, this module only counts
    - "Expiring soon" = expiry set and <= now + EXPIRING_SOON_DAYS (past expiries included)
    - Returns a flat dict of integer counts keyed as the JSON response

Design Decisions:
    - In-memory filtering over query-level filtering: all three tables are
      loaded anyway for the totals
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from certtrack.core.dates import cutoff_after_days, is_expiring_by

EXPIRING_SOON_DAYS = 30


class CourseLike(Protocol):
    is_active: bool


class CertificationLike(Protocol):
    expiry_date: datetime | None


def compute_stats(
    workers: Iterable[object],
    courses: Iterable[CourseLike],
    certifications: Iterable[CertificationLike],
    now: datetime | None = None,
) -> dict:
    """Compute dashboard counts. Pure, no IO."""
    certifications = list(certifications)
    cutoff = cutoff_after_days(EXPIRING_SOON_DAYS, now)
    return {
        "totalWorkers": sum(1 for _ in workers),
        "activeCourses": sum(1 for c in courses if c.is_active),
        "totalCertifications": len(certifications),
        "expiringSoon": sum(
            1 for c in certifications if is_expiring_by(c.expiry_date, cutoff)
        ),
    }
