"""Unit tests for error code to HTTP status mapping"""

import pytest
from src.api.error import ClientError, status_for
from src.libs.result import Error


class TestStatusFor:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("UNAUTHORIZED", 401),
            ("FORBIDDEN", 403),
            ("BAD_REQUEST", 400),
            ("VALIDATION_ERROR", 400),
            ("MIXED_CURRENCIES", 400),
            ("STATEMENT_NOT_FOUND", 404),
            ("CONTRACTOR_NOT_FOUND", 404),
            ("INVOICE_NOT_FOUND", 404),
            ("INVALID_TRANSITION", 409),
            ("STATEMENT_LOCKED", 409),
            ("STATEMENT_INVOICED", 409),
            ("INVARIANT_VIOLATION", 500),
            ("ISSUE_INVOICE_FAILED", 500),
            ("INVOICE_NUMBER_ALLOCATION_FAILED", 500),
        ],
    )
    def test_mapping(self, code, expected):
        assert status_for(code) == expected


class TestClientError:
    def test_body_hides_reason(self):
        error = ClientError(Error(code="FORBIDDEN", message="Access denied", reason="tenant_a != tenant_b"))

        assert error.status_code == 403
        assert error.to_body() == {"error": {"code": "FORBIDDEN", "message": "Access denied"}}

    def test_server_errors_get_generic_message(self):
        error = ClientError(Error(code="ISSUE_INVOICE_FAILED", message="Failed to issue invoice", reason="boom"))

        body = error.to_body()

        assert body["error"]["code"] == "ISSUE_INVOICE_FAILED"
        assert body["error"]["message"] == "An unexpected error occurred"

    def test_explicit_status_code_wins(self):
        error = ClientError(Error(code="VALIDATION_ERROR", message="bad"), status_code=422)

        assert error.status_code == 422
