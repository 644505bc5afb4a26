"""Tenant Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.tenant import Tenant


class TenantRepository(ABC):
    """Repository interface for Tenant persistence"""

    @abstractmethod
    async def create(self, tenant: Tenant) -> Tenant:
        pass

    @abstractmethod
    async def get_by_id(self, tenant_id: str) -> Optional[Tenant]:
        pass
