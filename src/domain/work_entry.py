"""Work Entry Domain Entity

Immutable append-only record of delivered work. The sum of
quantity * unit_price over a date range is the financial ground truth.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Date, ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class TariffType(str, Enum):
    """How a work entry is billed"""
    STOP = "stop"          # Per delivery stop
    HOUR = "hour"          # Per hour worked
    LOCATION = "location"  # Per location visited
    POINT = "point"        # Per point (piece rate)
    PROJECT = "project"    # Fixed project price


class WorkEntry(BaseModel, table=True):
    """
    Work Entry - One billable unit of delivered work

    Domain Rules:
    - Entries are immutable (append-only)
    - quantity > 0, unit_price >= 0
    - Contractor must belong to the entry's tenant (checked by RecordWorkEntry)
    """

    __tablename__ = "work_entries"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="quantity_positive"),
        CheckConstraint("unit_price >= 0", name="unit_price_non_negative"),
        Index("ix_work_entries_tenant_date", "tenant_id", "work_date"),
        Index("ix_work_entries_contractor_date", "contractor_id", "work_date"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique work entry identifier (UUID)"
    )

    tenant_id: str = Field(
        sa_column=Column(String(36), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False),
    )

    contractor_id: str = Field(
        sa_column=Column(String(36), ForeignKey("contractors.id", ondelete="CASCADE"), nullable=False),
    )

    work_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Calendar date the work was delivered"
    )

    tariff_type: TariffType = Field(
        description="Billing unit (stop, hour, location, point, project)"
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Number of units delivered (> 0)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Price per unit (>= 0)"
    )

    currency: str = Field(
        default="EUR",
        sa_column=Column(String(3), nullable=False),
        description="Currency code (ISO 4217)"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
