"""DeleteExpense Use Case"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.expense_repository import ExpenseRepository
from src.domain.principal import Principal

logger = logging.getLogger(__name__)


class DeleteExpense:
    """
    Use Case: Delete an expense

    Same scope as recording: company roles within their tenant, contractors
    for their own expenses.
    """

    def __init__(self, uow: UnitOfWork, expense_repo: ExpenseRepository):
        self.uow = uow
        self.expense_repo = expense_repo

    async def execute(self, expense_id: str, principal: Optional[Principal]) -> Result[None]:
        try:
            auth = require_principal(principal)
            if auth.is_err():
                return auth

            expense = await self.expense_repo.get_by_id(expense_id)
            if not expense:
                return Return.err(
                    Error(
                        code=errors.EXPENSE_NOT_FOUND,
                        message=f"Expense {expense_id} not found",
                        reason="Expense does not exist",
                    )
                )

            access = authorize(principal, expense.tenant_id, expense.contractor_id)
            if access.is_err():
                return access

            await self.expense_repo.delete(expense)
            await self.uow.commit()

            logger.info(f"Deleted expense {expense_id} of contractor {expense.contractor_id}")

            return Return.ok()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete expense {expense_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_EXPENSE_FAILED",
                    message="Failed to delete expense",
                    reason=str(e),
                )
            )
