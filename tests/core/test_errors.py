"""Error hierarchy: status codes and the REST envelope."""

from postboard.core.errors import (
    DatabaseError, ErrorCategory, RecordNotFoundError, ResourceNotFoundError,
    error_body,
)


def test_resource_not_found_is_404():
    err = ResourceNotFoundError("Post")
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.to_response() == {
        "error": {"message": "Post not found", "status": 404},
    }


def test_database_error_is_500():
    err = DatabaseError("Integrity constraint violated", "create")
    assert err.http_status == 500
    assert err.code == "DATABASE_ERROR"
    assert err.message == "Database create failed: Integrity constraint violated"


def test_record_not_found_is_a_500_database_error():
    err = RecordNotFoundError("Record to delete does not exist", "delete")
    assert isinstance(err, DatabaseError)
    assert err.http_status == 500
    assert err.code == "RECORD_NOT_FOUND"


def test_error_body_defaults_status_to_500():
    assert error_body("boom", None) == {
        "error": {"message": "boom", "status": 500},
    }
