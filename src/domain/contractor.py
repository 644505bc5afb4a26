"""Contractor Domain Entity

An independent worker (ZZP'er) who bills exactly one tenant.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, String
from src.domain.base import BaseModel, generate_uuid


class Contractor(BaseModel, table=True):
    """
    Contractor - ZZP freelancer linked to a tenant

    Domain Rules:
    - Belongs to exactly one tenant
    - Contact fields are informational only
    """

    __tablename__ = "contractors"
    __table_args__ = (
        Index("ix_contractors_tenant_id", "tenant_id"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique contractor identifier (UUID)"
    )

    tenant_id: str = Field(
        sa_column=Column(String(36), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False),
        description="Owning tenant"
    )

    full_name: str = Field(sa_column=Column(String(255), nullable=False))

    email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))

    phone: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))

    external_ref: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
        description="Tenant-side reference for the contractor (e.g. supplier number)"
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
