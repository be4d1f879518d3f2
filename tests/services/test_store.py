"""CertificationStore — inserts, reads, and integrity error translation."""

from datetime import datetime, timedelta, timezone

import pytest

from certtrack.core.errors import DatabaseError, DuplicateEntryError


async def test_add_worker_assigns_id(store):
    worker = await store.add_worker({"name": "Jane Doe"})
    assert worker.id is not None
    assert worker.created_at is not None


async def test_lists_are_ordered_by_id(store):
    first = await store.add_course({"name": "A"})
    second = await store.add_course({"name": "B"})
    assert [c.id for c in await store.list_courses()] == [first.id, second.id]


async def test_duplicate_certificate_number_raises_tagged_error(store, seed_worker):
    data = {
        "worker_id": seed_worker.id,
        "name": "Safety",
        "certificate_number": "C-1",
        "issued_date": datetime.now(timezone.utc),
    }
    await store.add_certification(dict(data))
    with pytest.raises(DuplicateEntryError) as exc_info:
        await store.add_certification(dict(data))
    assert exc_info.value.http_status == 409
    assert exc_info.value.context.table == "certifications"


async def test_store_usable_after_duplicate(store, seed_worker):
    now = datetime.now(timezone.utc)
    base = {"worker_id": seed_worker.id, "name": "S", "issued_date": now}
    await store.add_certification({**base, "certificate_number": "X-1"})
    with pytest.raises(DuplicateEntryError):
        await store.add_certification({**base, "certificate_number": "X-1"})
    await store.add_certification({**base, "certificate_number": "X-2"})
    numbers = [c.certificate_number for c in await store.list_certifications()]
    assert numbers == ["X-1", "X-2"]


async def test_expiring_by_excludes_null_and_later(store, seed_worker, make_certification):
    await make_certification(seed_worker.id, 2, name="in")
    await make_certification(seed_worker.id, 20, name="out")
    await make_certification(seed_worker.id, None, name="none")

    cutoff = datetime.now(timezone.utc) + timedelta(days=10)
    rows = await store.list_certifications_expiring_by(cutoff)
    assert [r.name for r in rows] == ["in"]


async def test_missing_worker_reference_raises_database_error(store):
    with pytest.raises(DatabaseError) as exc_info:
        await store.add_certification({
            "worker_id": 999,
            "name": "Safety",
            "certificate_number": "C-9",
            "issued_date": datetime.now(timezone.utc),
        })
    assert exc_info.value.http_status == 500
    assert exc_info.value.context.table == "certifications"
    assert await store.list_certifications() == []
