"""GenerateStatement Use Case

Aggregates one contractor's work entries for an ISO week into the
statement for that period.
"""

import logging
from decimal import Decimal
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_company_role
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.contractor_repository import ContractorRepository
from src.app.repositories.statement_repository import StatementRepository
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.principal import Principal
from src.domain.statement import StatementStatus
from .aggregation import resolve_period, upsert_period_statement
from .dtos import GenerateStatementCommandDTO, StatementDTO
from .mappers import statement_to_dto
from .sum_for_period import SumForPeriod

logger = logging.getLogger(__name__)


class GenerateStatement:
    """
    Use Case: Generate (or refresh) one contractor's weekly statement

    Business Rules:
    1. Company roles only, scoped to their own tenant
    2. At most one statement per (tenant, contractor, year, week)
    3. Repeated runs with unchanged entries keep the same row and total
    4. No entries yields a zero-amount statement in the existing row's
       currency, or the default currency for a new row
    5. Invoiced or paid statements are never rewritten (STATEMENT_LOCKED)

    Flow:
    1. Authorize principal
    2. Resolve ISO week and its date range
    3. Verify contractor belongs to tenant
    4. Sum the contractor's entries for the range
    5. Upsert the statement and commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        contractor_repo: ContractorRepository,
        work_entry_repo: WorkEntryRepository,
        statement_repo: StatementRepository,
        default_currency: str = "EUR",
    ):
        self.uow = uow
        self.contractor_repo = contractor_repo
        self.work_entry_repo = work_entry_repo
        self.statement_repo = statement_repo
        self.default_currency = default_currency

    async def execute(
        self, command: GenerateStatementCommandDTO, principal: Optional[Principal]
    ) -> Result[StatementDTO]:
        try:
            # Step 1: Authorize
            role_check = require_company_role(principal)
            if role_check.is_err():
                return role_check

            access = authorize(principal, command.tenant_id)
            if access.is_err():
                return access

            if not command.contractor_id:
                return Return.err(
                    Error(
                        code=errors.BAD_REQUEST,
                        message="contractor_id is required",
                        reason="Single-contractor aggregation without contractor",
                    )
                )

            # Step 2: Resolve period
            period_result = resolve_period(command.year, command.week_number)
            if period_result.is_err():
                return period_result
            week, period = period_result.value

            # Step 3: Verify contractor ownership
            contractor = await self.contractor_repo.get_by_id(command.contractor_id)
            if not contractor or contractor.tenant_id != command.tenant_id:
                return Return.err(
                    Error(
                        code=errors.CONTRACTOR_NOT_FOUND,
                        message=f"Contractor {command.contractor_id} not found",
                        reason="Unknown contractor or cross-tenant reference",
                    )
                )

            # Step 4: Sum entries
            sums_result = await SumForPeriod(self.work_entry_repo).execute(
                tenant_id=command.tenant_id,
                start_date=period.start_date,
                end_date=period.end_date,
                contractor_id=command.contractor_id,
            )
            if sums_result.is_err():
                return sums_result

            sums = sums_result.value
            if sums:
                total_amount, currency = sums[0].total, sums[0].currency
            else:
                total_amount, currency = Decimal("0.00"), None

            # Step 5: Upsert
            statement, locked = await upsert_period_statement(
                self.uow,
                self.statement_repo,
                tenant_id=command.tenant_id,
                contractor_id=command.contractor_id,
                year=week.year,
                week_number=week.week_number,
                total_amount=total_amount,
                currency=currency,
                default_currency=self.default_currency,
            )

            if locked:
                return Return.err(
                    Error(
                        code=errors.STATEMENT_LOCKED,
                        message=f"Statement for {week.year}-W{week.week_number:02d} is "
                                f"{StatementStatus(statement.status).value} and can no longer be regenerated",
                        reason=f"statement_id={statement.id}",
                    )
                )

            logger.info(
                f"Statement {statement.id} for contractor {command.contractor_id} "
                f"{week.year}-W{week.week_number:02d}: {statement.total_amount} {statement.currency}"
            )

            return Return.ok(statement_to_dto(statement))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Statement generation failed for tenant {command.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="GENERATE_STATEMENT_FAILED",
                    message="Failed to generate statement",
                    reason=str(e),
                )
            )
