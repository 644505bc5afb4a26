"""Invoice Domain Entity

Legally numbered billing document issued exactly once per statement.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import ForeignKey, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class Invoice(BaseModel, table=True):
    """
    Invoice - Immutable legal invoice for one statement

    Domain Rules:
    - statement_id is unique: one invoice per statement, enforced by the store
    - invoice_number is unique, format FACT-YYYY-NNNN (sequence widens past 9999)
    - Sequence is per calendar year of issuance, not the statement's period
    - Amounts are snapshotted at issuance and never recomputed
    - A statement with an invoice cannot be deleted (ON DELETE RESTRICT)
    """

    __tablename__ = "invoices"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique invoice identifier (UUID)"
    )

    statement_id: str = Field(
        sa_column=Column(
            String(36),
            ForeignKey("statements.id", ondelete="RESTRICT"),
            nullable=False,
            unique=True,
        ),
        description="Invoiced statement (unique)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Legal invoice number (e.g., FACT-2025-0007)"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of rounded line totals"
    )

    tax_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="BTW over the subtotal"
    )

    total_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="subtotal + tax_amount"
    )

    currency: str = Field(
        default="EUR",
        sa_column=Column(String(3), nullable=False),
    )

    file_url: Optional[str] = Field(
        default=None,
        sa_column=Column(String(500), nullable=True),
        description="Location of an archived PDF, if stored externally"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Issuance timestamp"
    )


def format_invoice_number(prefix: str, year: int, sequence: int) -> str:
    """FACT-2025-0007; sequences past 9999 widen rather than wrap"""
    return f"{prefix}-{year}-{sequence:04d}"


def parse_invoice_sequence(invoice_number: str) -> int:
    """Numeric sequence suffix of an invoice number (FACT-2025-0007 -> 7)"""
    return int(invoice_number.rsplit("-", 1)[-1])
