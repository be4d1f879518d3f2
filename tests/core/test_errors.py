"""Tests for the error hierarchy — status codes and response bodies."""

from certtrack.core.errors import (
    CertTrackError, DatabaseError, DuplicateEntryError, ErrorCategory,
    RouteNotFoundError,
)


def test_duplicate_entry_is_409_with_fixed_message():
    err = DuplicateEntryError("UNIQUE constraint failed: certifications.certificate_number")
    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT
    assert err.to_response() == {
        "message": "Duplicate entry detected", "code": "DUPLICATE_ENTRY",
    }


def test_route_not_found_names_method_and_path():
    err = RouteNotFoundError("PUT", "/courses")
    assert err.http_status == 404
    assert err.to_response()["message"] == "Route not found: PUT /courses"


def test_database_error_is_500():
    err = DatabaseError("Integrity constraint violated", "insert")
    assert err.http_status == 500
    assert err.message == "Database insert failed: Integrity constraint violated"


def test_all_errors_share_base():
    for err in (
        DuplicateEntryError(), RouteNotFoundError("GET", "/x"),
        DatabaseError("m", "op"),
    ):
        assert isinstance(err, CertTrackError)
