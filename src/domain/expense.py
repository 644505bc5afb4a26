"""Expense Domain Entity

A deductible cost logged by a contractor. Expenses never reach a statement
or invoice; they only offset BTW in the tax overview.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Date, ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class Expense(BaseModel, table=True):
    """
    Expense - Cost paid by a contractor, amount excluding BTW

    Domain Rules:
    - amount > 0, stored to cents
    - Contractor must belong to the expense's tenant (checked by RecordExpense)
    """

    __tablename__ = "expenses"
    __table_args__ = (
        CheckConstraint("amount > 0", name="expense_amount_positive"),
        Index("ix_expenses_tenant_date", "tenant_id", "expense_date"),
        Index("ix_expenses_contractor_date", "contractor_id", "expense_date"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique expense identifier (UUID)"
    )

    tenant_id: str = Field(
        sa_column=Column(String(36), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False),
    )

    contractor_id: str = Field(
        sa_column=Column(String(36), ForeignKey("contractors.id", ondelete="CASCADE"), nullable=False),
    )

    expense_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the cost was incurred"
    )

    category: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
        description="Free-form grouping such as fuel or phone"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Amount paid (> 0)"
    )

    currency: str = Field(
        default="EUR",
        sa_column=Column(String(3), nullable=False),
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
