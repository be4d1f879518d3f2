"""Worker Enrollment — payload shaping and sequential inserts."""

import pytest
from pydantic import ValidationError

from certtrack.schemas.worker import WorkerEnrollmentCreate
from certtrack.services.enrollment import build_certification_payload, enroll_worker


def test_payload_stamps_worker_id_and_drops_unknown_keys():
    payload = build_certification_payload(
        {"name": "Safety", "certificateNumber": "C-1", "workerId": 999, "extra": 1},
        worker_id=7,
    )
    assert payload["workerId"] == 7
    assert "extra" not in payload
    assert payload["issuedDate"] is None
    assert payload["status"] is None


async def test_enroll_inserts_in_order(store):
    result = await enroll_worker(store, WorkerEnrollmentCreate(
        worker={"name": "Jane Doe"},
        certifications=[
            {"name": "One", "certificateNumber": "N-1"},
            {"name": "Two", "certificateNumber": "N-2"},
        ],
    ))
    assert [c.certificate_number for c in result.certifications] == ["N-1", "N-2"]
    assert all(c.worker_id == result.worker.id for c in result.certifications)
    assert all(c.status == "active" for c in result.certifications)


async def test_enroll_null_certifications_is_empty(store):
    result = await enroll_worker(store, WorkerEnrollmentCreate(
        worker={"name": "Solo"}, certifications=None,
    ))
    assert result.certifications == []


async def test_enroll_invalid_worker_inserts_nothing(store):
    with pytest.raises(ValidationError):
        await enroll_worker(store, WorkerEnrollmentCreate(worker={"name": ""}))
    assert await store.list_workers() == []


def test_payload_reads_field_names_and_prefers_camel_case():
    payload = build_certification_payload(
        {
            "name": "Safety",
            "certificate_number": "C-2",
            "course_id": 3,
            "expiryDate": "2030-01-01",
            "expiry_date": "1999-01-01",
        },
        worker_id=7,
    )
    assert payload["certificateNumber"] == "C-2"
    assert payload["courseId"] == 3
    assert payload["expiryDate"] == "2030-01-01"
