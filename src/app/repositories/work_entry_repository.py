"""Work Entry Repository Interface

Defines the contract for the append-only work-entry ledger.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from src.domain.work_entry import WorkEntry


class WorkEntryRepository(ABC):
    """
    Repository interface for WorkEntry persistence

    Append-only: there are no update or delete operations.
    """

    @abstractmethod
    async def create(self, entry: WorkEntry) -> WorkEntry:
        """
        Append a work entry

        Args:
            entry: WorkEntry entity to persist

        Returns:
            Created WorkEntry
        """
        pass

    @abstractmethod
    async def list_for_period(
        self,
        tenant_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        contractor_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[WorkEntry]:
        """
        List entries of a tenant within an inclusive date range

        Results are ordered deterministically by contractor, work date and
        creation time so aggregation is stable.

        Args:
            tenant_id: Tenant identifier
            start_date: First day (inclusive), None for unbounded
            end_date: Last day (inclusive), None for unbounded
            contractor_id: Optional contractor filter
            limit: Page size, None returns every matching entry
            offset: Number of entries to skip

        Returns:
            List of work entries
        """
        pass
