"""Statement Repository Interface

Defines the contract for statement persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.statement import Statement, StatementStatus


class StatementRepository(ABC):
    """
    Repository interface for Statement persistence

    Statements are unique per (tenant_id, contractor_id, year, week_number).
    """

    @abstractmethod
    async def create(self, statement: Statement) -> Statement:
        """
        Insert a new statement

        Raises:
            IntegrityError: If a statement for the same period key already exists
        """
        pass

    @abstractmethod
    async def get_by_id(self, statement_id: str, for_update: bool = False) -> Optional[Statement]:
        """
        Retrieve statement by ID

        Args:
            statement_id: Statement ID
            for_update: If True, lock the row (SELECT FOR UPDATE) where supported

        Returns:
            Statement if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_period(
        self,
        tenant_id: str,
        contractor_id: str,
        year: int,
        week_number: int,
        for_update: bool = False,
    ) -> Optional[Statement]:
        """
        Retrieve the statement for a period key

        Args:
            tenant_id: Tenant identifier
            contractor_id: Contractor identifier
            year: ISO year
            week_number: ISO week
            for_update: If True, lock the row where supported

        Returns:
            Statement if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, statement: Statement) -> Statement:
        """Persist changes to an existing statement (bumps updated_at)"""
        pass

    @abstractmethod
    async def list(
        self,
        tenant_id: str,
        contractor_id: Optional[str] = None,
        status: Optional[StatementStatus] = None,
        year: Optional[int] = None,
        week_number: Optional[int] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Statement]:
        """
        List statements of a tenant, newest first

        Args:
            tenant_id: Tenant identifier (always required)
            contractor_id: Optional contractor filter
            status: Optional status filter
            year: Optional ISO year filter
            week_number: Optional ISO week filter
            limit: Maximum number of rows
            offset: Offset for pagination

        Returns:
            List of statements
        """
        pass

    @abstractmethod
    async def delete(self, statement: Statement) -> None:
        """Physically delete a statement"""
        pass
