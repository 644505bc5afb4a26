"""ListExpenses Use Case"""

from datetime import date
from typing import Optional
from src.libs.result import Result, Return
from src.app import errors
from src.app.security.tenant_guard import authorize
from src.app.repositories.expense_repository import ExpenseRepository
from src.domain.principal import Principal, Role
from .dtos import ListExpensesResponseDTO
from .mappers import expense_to_dto


class ListExpenses:
    """
    Use case: List expenses

    Company roles see their tenant, optionally narrowed to one contractor.
    Contractors see only their own expenses.
    """

    def __init__(self, expense_repo: ExpenseRepository):
        self.expense_repo = expense_repo

    async def execute(
        self,
        principal: Optional[Principal],
        tenant_id: Optional[str],
        contractor_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> Result[ListExpensesResponseDTO]:
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

        expenses = await self.expense_repo.list(
            tenant_id=tenant_id,
            contractor_id=contractor_id,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ListExpensesResponseDTO(
                expenses=[expense_to_dto(e) for e in expenses],
                limit=limit,
                offset=offset,
            )
        )
