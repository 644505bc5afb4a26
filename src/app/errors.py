"""Stable error codes shared by all use cases

The API layer maps these to HTTP statuses (see src/api/error.py).
"""

from src.libs.result import Error

# Authentication / authorization
UNAUTHORIZED = "UNAUTHORIZED"
FORBIDDEN = "FORBIDDEN"
BAD_REQUEST = "BAD_REQUEST"

# Input validation
VALIDATION_ERROR = "VALIDATION_ERROR"
MIXED_CURRENCIES = "MIXED_CURRENCIES"

# Missing resources
TENANT_NOT_FOUND = "TENANT_NOT_FOUND"
CONTRACTOR_NOT_FOUND = "CONTRACTOR_NOT_FOUND"
STATEMENT_NOT_FOUND = "STATEMENT_NOT_FOUND"
INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
EXPENSE_NOT_FOUND = "EXPENSE_NOT_FOUND"

# Conflicts
INVALID_TRANSITION = "INVALID_TRANSITION"
STATEMENT_LOCKED = "STATEMENT_LOCKED"
STATEMENT_INVOICED = "STATEMENT_INVOICED"

# Bug signals
INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
INVOICE_NUMBER_ALLOCATION_FAILED = "INVOICE_NUMBER_ALLOCATION_FAILED"


def validation_error(message: str, reason: str = "Invalid input") -> Error:
    return Error(code=VALIDATION_ERROR, message=message, reason=reason)


def statement_not_found(statement_id: str) -> Error:
    return Error(
        code=STATEMENT_NOT_FOUND,
        message=f"Statement {statement_id} not found",
        reason="Statement does not exist",
    )
