"""Data Transfer Objects for Billing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class RecordWorkEntryCommandDTO(BaseModel):
    """
    Command DTO for recording delivered work

    Used as input to RecordWorkEntry use case. Domain checks (tariff type,
    positive quantity, contractor ownership) happen in the use case so they
    surface as VALIDATION_ERROR.
    """

    tenant_id: str = Field(
        ...,
        description="Tenant identifier"
    )

    contractor_id: str = Field(
        ...,
        description="Contractor who delivered the work"
    )

    work_date: date = Field(
        ...,
        description="Calendar date of the work"
    )

    tariff_type: str = Field(
        ...,
        description="Billing unit (stop, hour, location, point, project)"
    )

    quantity: Decimal = Field(
        ...,
        description="Number of units delivered (must be > 0)"
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
        description="Free-text description shown on the invoice"
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
                "currency": "EUR",
                "notes": "Bezorgroute Utrecht-Noord"
            }
        }


class WorkEntryDTO(BaseModel):
    """Work entry as returned by RecordWorkEntry and ListWorkEntries"""

    id: str = Field(..., description="Work entry ID")
    tenant_id: str = Field(..., description="Tenant identifier")
    contractor_id: str = Field(..., description="Contractor identifier")
    work_date: date = Field(..., description="Calendar date of the work")
    tariff_type: str = Field(..., description="Billing unit")
    quantity: Decimal = Field(..., description="Units delivered")
    unit_price: Decimal = Field(..., description="Price per unit")
    line_total: Decimal = Field(..., description="quantity * unit_price rounded to cents")
    currency: str = Field(..., description="Currency code")
    notes: Optional[str] = Field(default=None, description="Free-text description")
    created_at: datetime = Field(..., description="Recording timestamp")


class ListWorkEntriesResponseDTO(BaseModel):
    entries: List[WorkEntryDTO] = Field(
        default_factory=list,
        description="Work entries ordered by contractor and date"
    )
    limit: int = Field(..., description="Page size")
    offset: int = Field(..., description="Page offset")


class PeriodSumDTO(BaseModel):
    """
    Per-contractor sum of work entries over a date range

    Returned by SumForPeriod, one element per contractor with entries.
    """

    contractor_id: str = Field(..., description="Contractor identifier")

    total: Decimal = Field(
        ...,
        description="Sum of rounded line totals"
    )

    currency: str = Field(..., description="Currency shared by all entries")

    entry_count: int = Field(..., description="Number of entries summed")


class GenerateStatementCommandDTO(BaseModel):
    """
    Command DTO for statement aggregation

    With contractor_id the GenerateStatement use case handles one
    contractor; without it GenerateTenantStatements handles every
    contractor with entries. year and week_number each default to the
    current ISO week.
    """

    tenant_id: str = Field(
        ...,
        description="Tenant identifier"
    )

    contractor_id: Optional[str] = Field(
        default=None,
        description="Restrict aggregation to one contractor"
    )

    year: Optional[int] = Field(
        default=None,
        description="ISO week-numbering year (defaults to current)"
    )

    week_number: Optional[int] = Field(
        default=None,
        description="ISO week number (defaults to current)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "c1d2e3f4-a5b6-7890-cdef-123456789abc",
                "contractor_id": "0b6f6a52-3f7e-4a55-8d8e-9f0e4d2b7c31",
                "year": 2024,
                "week_number": 48
            }
        }


class StatementDTO(BaseModel):
    """Statement response returned by the aggregator and statement reads"""

    id: str = Field(..., description="Statement ID")
    tenant_id: str = Field(..., description="Tenant identifier")
    contractor_id: str = Field(..., description="Contractor identifier")
    year: int = Field(..., description="ISO year")
    week_number: int = Field(..., description="ISO week")
    total_amount: Decimal = Field(..., description="Aggregated total")
    currency: str = Field(..., description="Currency code")
    status: str = Field(..., description="open, approved, invoiced or paid")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last aggregation or status change")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "6f1c2d7e-8a52-4a8e-9d0c-3b1c1f0d2a11",
                "tenant_id": "c1d2e3f4-a5b6-7890-cdef-123456789abc",
                "contractor_id": "0b6f6a52-3f7e-4a55-8d8e-9f0e4d2b7c31",
                "year": 2024,
                "week_number": 48,
                "total_amount": "600.00",
                "currency": "EUR",
                "status": "open",
                "created_at": "2024-11-29T10:00:00Z",
                "updated_at": "2024-11-29T10:00:00Z"
            }
        }


class TenantStatementsResponseDTO(BaseModel):
    """
    Response DTO for tenant-wide aggregation

    locked lists ids of invoiced/paid statements that were left untouched.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    year: int = Field(..., description="ISO year")
    week_number: int = Field(..., description="ISO week")

    statements: List[StatementDTO] = Field(
        default_factory=list,
        description="Statements created or updated"
    )

    locked: List[str] = Field(
        default_factory=list,
        description="IDs of statements not re-aggregated because they are invoiced or paid"
    )


class ListStatementsResponseDTO(BaseModel):
    statements: List[StatementDTO] = Field(default_factory=list)
    limit: int = Field(..., description="Page size")
    offset: int = Field(..., description="Page offset")


class UpdateStatementStatusCommandDTO(BaseModel):
    """Command DTO for a forward status transition"""

    statement_id: str = Field(..., description="Statement ID")

    status: str = Field(
        ...,
        description="Target status (approved, invoiced, paid)"
    )


class IssueInvoiceCommandDTO(BaseModel):
    """Command DTO for invoice issuance"""

    statement_id: str = Field(
        ...,
        description="Statement to invoice"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "statement_id": "6f1c2d7e-8a52-4a8e-9d0c-3b1c1f0d2a11"
            }
        }


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice issuance and lookup

    is_existing is True when the invoice was issued by an earlier request.
    Amounts are the snapshot stored at issuance.
    """

    invoice_id: str = Field(
        ...,
        description="Invoice ID"
    )

    invoice_number: str = Field(
        ...,
        description="Legal invoice number (FACT-YYYY-NNNN)"
    )

    is_existing: bool = Field(
        ...,
        description="True if the invoice already existed for the statement"
    )

    statement_id: str = Field(
        ...,
        description="Invoiced statement"
    )

    year: int = Field(..., description="Statement ISO year")

    week_number: int = Field(..., description="Statement ISO week")

    subtotal: Decimal = Field(
        ...,
        description="Sum of rounded line totals"
    )

    tax: Decimal = Field(
        ...,
        description="BTW over the subtotal"
    )

    total: Decimal = Field(
        ...,
        description="subtotal + tax"
    )

    currency: str = Field(..., description="Currency code")

    created_at: datetime = Field(
        ...,
        description="Issuance timestamp"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": "9a0e7b6c-5d4f-4e3a-8b2c-1d0e9f8a7b6c",
                "invoice_number": "FACT-2025-0001",
                "is_existing": False,
                "statement_id": "6f1c2d7e-8a52-4a8e-9d0c-3b1c1f0d2a11",
                "year": 2024,
                "week_number": 48,
                "subtotal": "600.00",
                "tax": "126.00",
                "total": "726.00",
                "currency": "EUR",
                "created_at": "2025-01-06T09:00:00Z"
            }
        }


class InvoicePdfDTO(BaseModel):
    invoice_number: str = Field(..., description="Legal invoice number")
    filename: str = Field(..., description="Suggested download filename")
    content: bytes = Field(..., description="Rendered PDF document")


class RegisterContractorCommandDTO(BaseModel):
    """Command DTO for registering a contractor under a tenant"""

    tenant_id: str = Field(..., description="Tenant identifier")

    full_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Contractor's full name"
    )

    email: Optional[str] = Field(default=None, description="Contact e-mail")

    phone: Optional[str] = Field(default=None, description="Contact phone")

    external_ref: Optional[str] = Field(
        default=None,
        description="Reference in the company's own administration"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "c1d2e3f4-a5b6-7890-cdef-123456789abc",
                "full_name": "Jan de Vries",
                "email": "jan@example.nl",
                "phone": "+31612345678",
                "external_ref": "ZZP-042"
            }
        }


class ContractorDTO(BaseModel):
    id: str = Field(..., description="Contractor ID")
    tenant_id: str = Field(..., description="Tenant identifier")
    full_name: str = Field(..., description="Full name")
    email: Optional[str] = None
    phone: Optional[str] = None
    external_ref: Optional[str] = None
    created_at: datetime = Field(..., description="Registration timestamp")


class ListContractorsResponseDTO(BaseModel):
    contractors: List[ContractorDTO] = Field(default_factory=list)


class RegisterTenantCommandDTO(BaseModel):
    """Command DTO for registering a hiring company"""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Registered company name"
    )

    kvk_number: Optional[str] = Field(default=None, description="KVK registration number")

    btw_number: Optional[str] = Field(default=None, description="BTW identification number")

    email: Optional[str] = Field(default=None, description="Invoice e-mail address")

    phone: Optional[str] = Field(default=None, description="Contact phone")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Bezorg BV",
                "kvk_number": "12345678",
                "btw_number": "NL001234567B01",
                "email": "facturen@bezorg.nl",
                "phone": "+31101234567"
            }
        }


class TenantDTO(BaseModel):
    id: str = Field(..., description="Tenant ID")
    name: str = Field(..., description="Registered company name")
    kvk_number: Optional[str] = None
    btw_number: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime = Field(..., description="Registration timestamp")


class RecordExpenseCommandDTO(BaseModel):
    """
    Command DTO for logging a contractor expense

    Amount and currency checks happen in RecordExpense so they surface as
    VALIDATION_ERROR.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    contractor_id: str = Field(..., description="Contractor who paid the cost")
    expense_date: date = Field(..., description="Date the cost was incurred")
    amount: Decimal = Field(..., description="Amount excluding BTW (> 0)")
    currency: str = Field(default="EUR", description="Currency code (ISO 4217)")
    category: Optional[str] = Field(default=None, description="Grouping such as fuel or phone")
    notes: Optional[str] = Field(default=None, description="Free-text description")

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "c1d2e3f4-a5b6-7890-cdef-123456789abc",
                "contractor_id": "0b6f6a52-3f7e-4a55-8d8e-9f0e4d2b7c31",
                "expense_date": "2024-11-27",
                "amount": "45.80",
                "currency": "EUR",
                "category": "fuel"
            }
        }


class ExpenseDTO(BaseModel):
    id: str = Field(..., description="Expense ID")
    tenant_id: str = Field(..., description="Tenant identifier")
    contractor_id: str = Field(..., description="Contractor identifier")
    expense_date: date = Field(..., description="Date the cost was incurred")
    category: Optional[str] = None
    amount: Decimal = Field(..., description="Amount excluding BTW")
    currency: str = Field(..., description="Currency code")
    notes: Optional[str] = None
    created_at: datetime = Field(..., description="Recording timestamp")


class ListExpensesResponseDTO(BaseModel):
    expenses: List[ExpenseDTO] = Field(
        default_factory=list,
        description="Expenses, newest expense date first"
    )
    limit: int = Field(..., description="Page size")
    offset: int = Field(..., description="Page offset")


class BtwOverviewDTO(BaseModel):
    """
    BTW position for one reporting period

    Expense fields are only filled when the overview is narrowed to one
    contractor, since expenses belong to contractors.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    contractor_id: Optional[str] = Field(default=None, description="Contractor filter, if any")
    period: str = Field(..., description="month, quarter or year")
    year: int = Field(..., description="Calendar year")
    value: Optional[int] = Field(default=None, description="Month or quarter number")
    start_date: date = Field(..., description="First day of the period")
    end_date: date = Field(..., description="Last day of the period")
    currency: str = Field(..., description="Currency of all amounts")
    subtotal: Decimal = Field(..., description="Revenue from work entries")
    btw: Decimal = Field(..., description="BTW due on the revenue")
    net: Decimal = Field(..., description="subtotal + btw")
    expense_total: Optional[Decimal] = Field(default=None, description="Sum of expenses")
    btw_paid: Optional[Decimal] = Field(default=None, description="BTW on expenses")
    btw_balance: Optional[Decimal] = Field(default=None, description="btw - btw_paid")
