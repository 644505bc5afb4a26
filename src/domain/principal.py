"""Authenticated principal

The identity the authentication layer hands to the core. Role is a closed
enum; scope decisions are made only by the tenant guard.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Principal roles"""
    COMPANY_ADMIN = "company_admin"
    COMPANY_STAFF = "company_staff"
    CONTRACTOR = "contractor"

    @property
    def is_company(self) -> bool:
        return self in (Role.COMPANY_ADMIN, Role.COMPANY_STAFF)


@dataclass(frozen=True)
class Principal:
    """
    Authenticated caller

    tenant_id is the company the caller belongs to. contractor_id is set
    for contractor principals only.
    """

    role: Role
    tenant_id: str
    contractor_id: Optional[str] = None
