"""Worker Enrollment — create a worker together with the certifications it holds.

Invariants:
    - Worker is validated and inserted first; its id is stamped on every certification
    - Certifications are validated and inserted one at a time, in payload order
    - Missing issuedDate -> now, missing expiryDate -> None, missing status -> "active"
    - Any failure aborts the remaining items; rows already inserted stay committed

Design Decisions:
    - Non-atomic: each insert commits on its own (CertificationStore._insert);
      the client sees only the failure, never which items succeeded
    - Certification items are validated after the worker exists because
      workerId is only known then
"""

import logging
from typing import Any

from certtrack.schemas.certification import CertificationCreate, CertificationRead
from certtrack.schemas.worker import (
    WorkerCreate, WorkerEnrollmentCreate, WorkerEnrollmentRead, WorkerRead,
)
from certtrack.services.store import CertificationStore

logger = logging.getLogger(__name__)

# Nested certification fields as (JSON name, field name); either spelling is accepted
_NESTED_CERTIFICATION_KEYS = (
    ("courseId", "course_id"),
    ("name", "name"),
    ("certificateNumber", "certificate_number"),
    ("issuedDate", "issued_date"),
    ("expiryDate", "expiry_date"),
    ("status", "status"),
)


def build_certification_payload(item: dict[str, Any], worker_id: int) -> dict[str, Any]:
    """Shape a nested certification item into a CertificationCreate payload.

    Unknown keys (including any client-sent workerId) are dropped.
    """
    payload = {
        alias: item[alias] if alias in item else item.get(name)
        for alias, name in _NESTED_CERTIFICATION_KEYS
    }
    payload["workerId"] = worker_id
    return payload


async def enroll_worker(
    store: CertificationStore, body: WorkerEnrollmentCreate,
) -> WorkerEnrollmentRead:
    """Insert the worker, then each certification in order."""
    worker_data = WorkerCreate.model_validate(body.worker)
    worker = await store.add_worker(worker_data.model_dump())

    created: list[CertificationRead] = []
    for item in body.certifications or []:
        cert_data = CertificationCreate.model_validate(
            build_certification_payload(item, worker.id),
        )
        certification = await store.add_certification(cert_data.model_dump())
        created.append(CertificationRead.model_validate(certification))

    logger.info(
        f"Worker enrolled with {len(created)} certification(s)",
        extra={"table": "workers", "record_id": worker.id},
    )
    return WorkerEnrollmentRead(
        worker=WorkerRead.model_validate(worker), certifications=created,
    )
