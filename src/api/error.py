"""API error mapping

Use cases report failures as Error codes; ClientError carries one to the
HTTP layer, where it is rendered as {"error": {"code", "message"}}.
"""

from typing import Optional
from fastapi import status
from src.libs.result import Error
from src.app import errors

GENERIC_SERVER_MESSAGE = "An unexpected error occurred"

STATUS_BY_CODE = {
    errors.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    errors.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    errors.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    errors.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    errors.MIXED_CURRENCIES: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    errors.STATEMENT_LOCKED: status.HTTP_409_CONFLICT,
    errors.STATEMENT_INVOICED: status.HTTP_409_CONFLICT,
    errors.INVARIANT_VIOLATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(code: str) -> int:
    if code in STATUS_BY_CODE:
        return STATUS_BY_CODE[code]
    if code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for(error.code)

    def to_body(self) -> dict:
        message = self.error.message
        if self.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            message = GENERIC_SERVER_MESSAGE
        return {"error": {"code": self.error.code, "message": message}}
