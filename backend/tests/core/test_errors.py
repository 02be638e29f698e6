"""Error Hierarchy — codes, statuses and the REST envelope."""

from pledgewall.core.errors import (
    ErrorCategory,
    InvalidEnumError,
    MalformedSubmissionError,
    MethodNotSupportedError,
    MissingFieldsError,
    PledgeWallError,
    StoreUnavailableError,
)


def test_all_errors_share_base():
    for err in (
        MissingFieldsError(["name"]),
        InvalidEnumError("profileType", "X", ["Student"]),
        MalformedSubmissionError("bad"),
        MethodNotSupportedError("PUT", "/api/v1/pledges"),
        StoreUnavailableError("insert", "boom"),
    ):
        assert isinstance(err, PledgeWallError)


def test_status_codes():
    assert MissingFieldsError(["name"]).http_status == 400
    assert InvalidEnumError("profileType", "X", []).http_status == 400
    assert MalformedSubmissionError("bad").http_status == 400
    assert MethodNotSupportedError("PUT", "/").http_status == 405
    assert StoreUnavailableError("insert", "boom").http_status == 500


def test_envelope_is_flat():
    body = MissingFieldsError(["email", "mobile"]).to_response()
    assert body["error"] == "Missing fields: email, mobile"
    assert body["code"] == "MISSING_FIELDS"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["details"] == {"missing": ["email", "mobile"]}


def test_store_error_hides_reason_from_response():
    err = StoreUnavailableError("connect", "password authentication failed")
    body = err.to_response()
    assert body["error"] == "Server error"
    assert "details" not in body
    assert "password" not in str(body)
    assert "password authentication failed" in str(err)
    assert err.context.debug_info == {
        "operation": "connect", "reason": "password authentication failed",
    }


def test_invalid_enum_details():
    body = InvalidEnumError("profileType", "Astronaut", ["Student"]).to_response()
    assert body["details"] == {
        "field": "profileType", "value": "Astronaut", "allowed": ["Student"],
    }
