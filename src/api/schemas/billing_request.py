"""Request schemas for Billing API

Pydantic models for validating incoming HTTP requests. Shape checks live
here; domain rules (tariff types, positive quantities, ownership) are
enforced by the use cases and reported as VALIDATION_ERROR.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class RecordWorkEntryRequestSchema(BaseModel):
    """
    Request schema for recording a work entry

    Used for POST /work-entries endpoint.
    """

    tenant_id: str = Field(
        ...,
        min_length=1,
        description="Tenant identifier (required, non-empty)"
    )

    contractor_id: str = Field(
        ...,
        min_length=1,
        description="Contractor identifier (required, non-empty)"
    )

    work_date: date = Field(
        ...,
        description="Calendar date of the work (YYYY-MM-DD)"
    )

    tariff_type: str = Field(
        ...,
        description="Billing unit (stop, hour, location, point, project)"
    )

    quantity: Decimal = Field(
        ...,
        description="Units delivered (must be > 0)"
    )

    unit_price: Decimal = Field(
        ...,
        description="Price per unit (must be >= 0)"
    )

    currency: str = Field(
        default="EUR",
        description="Currency code (ISO 4217)"
    )

    notes: Optional[str] = Field(
        default=None,
        max_length=2000,
        description="Free-text description"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "c1d2e3f4-a5b6-7890-cdef-123456789abc",
                "contractor_id": "0b6f6a52-3f7e-4a55-8d8e-9f0e4d2b7c31",
                "work_date": "2024-11-25",
                "tariff_type": "hour",
                "quantity": "8",
                "unit_price": "75.00",
                "currency": "EUR"
            }
        }


class GenerateStatementRequestSchema(BaseModel):
    """
    Request schema for statement generation

    Used for POST /statements/generate endpoint. Omitting contractor_id
    generates statements for every contractor of the tenant.
    """

    tenant_id: str = Field(
        ...,
        min_length=1,
        description="Tenant identifier (required, non-empty)"
    )

    contractor_id: Optional[str] = Field(
        default=None,
        description="Single contractor to aggregate"
    )

    year: Optional[int] = Field(
        default=None,
        ge=1,
        le=9999,
        description="ISO week-numbering year (defaults to current)"
    )

    week_number: Optional[int] = Field(
        default=None,
        ge=1,
        le=53,
        description="ISO week number (defaults to current)"
    )

    @field_validator("contractor_id")
    @classmethod
    def blank_contractor_is_none(cls, v):
        """Treat an empty contractor_id as tenant-wide generation"""
        if v is not None and not v.strip():
            return None
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "c1d2e3f4-a5b6-7890-cdef-123456789abc",
                "year": 2024,
                "week_number": 48
            }
        }


class UpdateStatementStatusRequestSchema(BaseModel):
    """Request schema for PATCH /statements/{id}"""

    status: str = Field(
        ...,
        min_length=1,
        description="Target status (approved, invoiced, paid)"
    )


class IssueInvoiceRequestSchema(BaseModel):
    """Request schema for POST /invoices/generate"""

    statement_id: str = Field(
        ...,
        min_length=1,
        description="Statement to invoice"
    )


class RegisterContractorRequestSchema(BaseModel):
    """Request schema for POST /contractors"""

    tenant_id: str = Field(..., min_length=1, description="Tenant identifier")
    full_name: str = Field(..., min_length=1, max_length=255, description="Full name")
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    external_ref: Optional[str] = Field(default=None, max_length=100)


class RegisterTenantRequestSchema(BaseModel):
    """Request schema for POST /tenants"""

    name: str = Field(..., min_length=1, max_length=255, description="Registered company name")
    kvk_number: Optional[str] = Field(default=None, max_length=20)
    btw_number: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)


class RecordExpenseRequestSchema(BaseModel):
    """Request schema for POST /expenses"""

    tenant_id: str = Field(..., min_length=1, description="Tenant identifier")
    contractor_id: str = Field(..., min_length=1, description="Contractor who paid the cost")
    expense_date: date = Field(..., description="Date the cost was incurred (YYYY-MM-DD)")
    amount: Decimal = Field(..., description="Amount excluding BTW, greater than 0")
    currency: str = Field(default="EUR", description="ISO 4217 currency code")
    category: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=2000)
