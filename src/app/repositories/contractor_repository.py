"""Contractor Repository Interface

Defines the contract for contractor persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.contractor import Contractor


class ContractorRepository(ABC):
    """Repository interface for Contractor persistence"""

    @abstractmethod
    async def create(self, contractor: Contractor) -> Contractor:
        """
        Create a new contractor

        Args:
            contractor: Contractor entity to persist

        Returns:
            Created Contractor
        """
        pass

    @abstractmethod
    async def get_by_id(self, contractor_id: str) -> Optional[Contractor]:
        """
        Retrieve contractor by ID

        Args:
            contractor_id: Contractor ID

        Returns:
            Contractor if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: str) -> List[Contractor]:
        """
        List contractors of a tenant, newest first

        Args:
            tenant_id: Tenant identifier

        Returns:
            List of contractors
        """
        pass
