"""Error Hierarchy — tests for status codes, codes and the REST envelope."""

import pytest

from org_structure.core.errors import (
    CycleDetectedError, DatabaseError, DuplicateNameError, ErrorCategory,
    InvalidInputError, OrgStructureError, ResourceNotFoundError, SelfParentError,
)


@pytest.mark.parametrize(
    ("error", "status", "code"),
    [
        (InvalidInputError("bad", "name"), 400, "INVALID_INPUT"),
        (DuplicateNameError("Engineering", None), 400, "DUPLICATE_NAME"),
        (ResourceNotFoundError("Department", 5), 404, "RESOURCE_NOT_FOUND"),
        (SelfParentError(5), 409, "SELF_PARENT"),
        (CycleDetectedError(5, 9), 409, "CYCLE_DETECTED"),
        (DatabaseError("boom", "commit"), 500, "DATABASE_ERROR"),
    ],
)
def test_error_status_and_code(error, status, code):
    assert isinstance(error, OrgStructureError)
    assert error.http_status == status
    assert error.code == code


def test_to_response_envelope():
    body = SelfParentError(12).to_response()["error"]
    assert body["code"] == "SELF_PARENT"
    assert body["category"] == ErrorCategory.CONFLICT.value
    assert body["severity"] == "error"
    assert body["context"]["department_id"] == 12
    assert "timestamp" in body


def test_duplicate_name_message_names_scope():
    assert "root level" in DuplicateNameError("Sales", None).message
    assert "department 4" in DuplicateNameError("Sales", 4).message


def test_database_error_hides_nothing_but_is_critical():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.severity.value == "critical"
    assert err.operation == "commit"
