"""RecordExpense Use Case

Logs a deductible cost for a contractor.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.contractor_repository import ContractorRepository
from src.app.repositories.expense_repository import ExpenseRepository
from src.domain.expense import Expense
from src.domain.money import round_money
from src.domain.principal import Principal
from .dtos import ExpenseDTO, RecordExpenseCommandDTO
from .mappers import expense_to_dto

logger = logging.getLogger(__name__)


class RecordExpense:
    """
    Use Case: Record an expense

    Business Rules:
    1. Company roles for any contractor of their tenant, contractors for
       themselves only
    2. amount is finite and > 0, stored rounded to cents
    3. currency is a 3-letter code
    4. Contractor exists and belongs to the tenant
    """

    def __init__(
        self,
        uow: UnitOfWork,
        contractor_repo: ContractorRepository,
        expense_repo: ExpenseRepository,
    ):
        self.uow = uow
        self.contractor_repo = contractor_repo
        self.expense_repo = expense_repo

    async def execute(
        self, command: RecordExpenseCommandDTO, principal: Optional[Principal]
    ) -> Result[ExpenseDTO]:
        try:
            # Step 1: Authorize
            access = authorize(principal, command.tenant_id, command.contractor_id)
            if access.is_err():
                return access

            # Step 2: Validate values
            if not command.amount.is_finite() or command.amount <= 0:
                return Return.err(
                    errors.validation_error(
                        "amount must be a finite number greater than 0",
                        reason=f"amount={command.amount}",
                    )
                )

            amount = round_money(command.amount)
            if amount <= 0:
                return Return.err(
                    errors.validation_error(
                        "amount must be at least 0.01",
                        reason=f"amount={command.amount}",
                    )
                )

            currency = command.currency.upper()
            if len(currency) != 3 or not currency.isalpha():
                return Return.err(
                    errors.validation_error(
                        "currency must be a 3-letter ISO 4217 code",
                        reason=f"currency={command.currency!r}",
                    )
                )

            # Step 3: Verify ownership
            contractor = await self.contractor_repo.get_by_id(command.contractor_id)
            if not contractor or contractor.tenant_id != command.tenant_id:
                return Return.err(
                    errors.validation_error(
                        f"Contractor {command.contractor_id} does not belong to tenant {command.tenant_id}",
                        reason="Unknown contractor or cross-tenant reference",
                    )
                )

            # Step 4: Insert and commit
            expense = Expense(
                tenant_id=command.tenant_id,
                contractor_id=command.contractor_id,
                expense_date=command.expense_date,
                category=command.category,
                amount=amount,
                currency=currency,
                notes=command.notes,
            )
            created = await self.expense_repo.create(expense)
            await self.uow.commit()

            logger.info(
                f"Recorded expense {created.id} of {created.amount} {created.currency} "
                f"for contractor {created.contractor_id}"
            )

            return Return.ok(expense_to_dto(created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to record expense: {e}")
            return Return.err(
                Error(
                    code="RECORD_EXPENSE_FAILED",
                    message="Failed to record expense",
                    reason=str(e),
                )
            )
