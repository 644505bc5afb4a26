"""Expense Repository Interface"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from src.domain.expense import Expense


class ExpenseRepository(ABC):
    """Repository interface for Expense persistence"""

    @abstractmethod
    async def create(self, expense: Expense) -> Expense:
        pass

    @abstractmethod
    async def get_by_id(self, expense_id: str) -> Optional[Expense]:
        pass

    @abstractmethod
    async def list(
        self,
        tenant_id: str,
        contractor_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Expense]:
        """
        List expenses of a tenant, newest expense date first

        Args:
            tenant_id: Tenant identifier
            contractor_id: Optional contractor filter
            start_date: First day (inclusive), None for unbounded
            end_date: Last day (inclusive), None for unbounded
            limit: Page size, None returns every match
            offset: Number of expenses to skip
        """
        pass

    @abstractmethod
    async def delete(self, expense: Expense) -> None:
        pass
