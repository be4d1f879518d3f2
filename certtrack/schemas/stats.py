"""Stats Schema — dashboard counters returned by GET /stats."""

from certtrack.schemas.common import CamelModel


class StatsRead(CamelModel):
    total_workers: int
    active_courses: int
    total_certifications: int
    expiring_soon: int
