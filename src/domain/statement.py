"""Statement Domain Entity

Weekly aggregate of work entries for one (tenant, contractor, ISO week).
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, UniqueConstraint
from src.domain.base import BaseModel, generate_uuid


class StatementStatus(str, Enum):
    """Statement lifecycle states (forward-only)"""
    OPEN = "open"
    APPROVED = "approved"
    INVOICED = "invoiced"
    PAID = "paid"


class Statement(BaseModel, table=True):
    """
    Statement - Period aggregate of work entries

    Domain Rules:
    - At most one statement per (tenant_id, contractor_id, year, week_number)
    - total_amount is derived by aggregation, never edited by hand
    - Re-aggregation is refused once the statement is invoiced or paid
    - Status only moves forward (see StatementLifecycle)
    """

    __tablename__ = "statements"
    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "contractor_id", "year", "week_number",
            name="uq_statements_period",
        ),
        Index("ix_statements_tenant_id", "tenant_id"),
        Index("ix_statements_contractor_id", "contractor_id"),
        Index("ix_statements_year_week", "year", "week_number"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique statement identifier (UUID)"
    )

    tenant_id: str = Field(
        sa_column=Column(String(36), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False),
    )

    contractor_id: str = Field(
        sa_column=Column(String(36), ForeignKey("contractors.id", ondelete="CASCADE"), nullable=False),
    )

    year: int = Field(description="ISO week-numbering year")

    week_number: int = Field(description="ISO week number (1-53)")

    total_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of rounded line totals for the period"
    )

    currency: str = Field(
        default="EUR",
        sa_column=Column(String(3), nullable=False),
    )

    status: StatementStatus = Field(
        default=StatementStatus.OPEN,
        description="Lifecycle status (open, approved, invoiced, paid)"
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)

    updated_at: datetime = Field(default_factory=datetime.utcnow)

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
            }
        }
