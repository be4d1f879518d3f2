"""ORM Models — SQLAlchemy declarative models for workers, courses, certifications.

Invariants:
    - All models inherit from Base (db/base.py)
    - Certification is the only table with foreign keys

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from certtrack.models.worker import Worker  # noqa: F401
from certtrack.models.course import Course  # noqa: F401
from certtrack.models.certification import Certification  # noqa: F401
