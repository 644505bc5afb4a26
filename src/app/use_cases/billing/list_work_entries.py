"""ListWorkEntries Use Case

Lists work entries of a tenant, optionally narrowed to one contractor and
a date range.
"""

from datetime import date
from typing import Optional
from src.libs.result import Result, Return
from src.app import errors
from src.app.security.tenant_guard import authorize
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.principal import Principal, Role
from .dtos import ListWorkEntriesResponseDTO
from .mappers import work_entry_to_dto


class ListWorkEntries:
    """
    Use case: List work entries

    Company roles see their tenant. Contractors see only their own entries
    and must pass their contractor_id. Results are paged with limit and
    offset.
    """

    def __init__(self, work_entry_repo: WorkEntryRepository):
        self.work_entry_repo = work_entry_repo

    async def execute(
        self,
        principal: Optional[Principal],
        tenant_id: Optional[str],
        contractor_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> Result[ListWorkEntriesResponseDTO]:
        access = authorize(principal, tenant_id, contractor_id)
        if access.is_err():
            return access

        if principal.role == Role.CONTRACTOR and not tenant_id:
            tenant_id = principal.tenant_id

        if start_date and end_date and start_date > end_date:
            return Return.err(
                errors.validation_error(
                    "start_date must not be after end_date",
                    reason=f"start_date={start_date}, end_date={end_date}",
                )
            )

        entries = await self.work_entry_repo.list_for_period(
            tenant_id=tenant_id,
            start_date=start_date,
            end_date=end_date,
            contractor_id=contractor_id,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ListWorkEntriesResponseDTO(
                entries=[work_entry_to_dto(e) for e in entries],
                limit=limit,
                offset=offset,
            )
        )
