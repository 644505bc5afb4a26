"""Tenant Domain Entity

A hiring company. The tenant is the data isolation boundary: contractors,
work entries and statements all belong to exactly one tenant.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid


class Tenant(BaseModel, table=True):
    """
    Tenant - Company that engages contractors

    Domain Rules:
    - Identity is immutable for the lifetime of the system
    - Owns contractors, work entries and statements
    """

    __tablename__ = "tenants"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique tenant identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Registered company name"
    )

    kvk_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="Chamber of Commerce (KVK) registration number"
    )

    btw_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="VAT (BTW) identification number"
    )

    email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))

    phone: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Registration timestamp"
    )
