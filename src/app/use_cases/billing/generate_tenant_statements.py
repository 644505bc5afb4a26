"""GenerateTenantStatements Use Case

Aggregates every contractor of a tenant with work in an ISO week.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app.security.tenant_guard import authorize, require_company_role
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.statement_repository import StatementRepository
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.principal import Principal
from .aggregation import resolve_period, upsert_period_statement
from .dtos import GenerateStatementCommandDTO, TenantStatementsResponseDTO
from .mappers import statement_to_dto
from .sum_for_period import SumForPeriod

logger = logging.getLogger(__name__)


class GenerateTenantStatements:
    """
    Use Case: Generate weekly statements for all contractors of a tenant

    Business Rules:
    1. Only contractors with entries in the week get a statement
    2. Each contractor's statement is committed on its own
    3. Invoiced or paid statements are left untouched and reported as locked
    4. MIXED_CURRENCIES for any contractor aborts before anything is written

    Flow:
    1. Authorize principal
    2. Resolve ISO week and its date range
    3. Sum entries per contractor
    4. Upsert one statement per contractor
    """

    def __init__(
        self,
        uow: UnitOfWork,
        work_entry_repo: WorkEntryRepository,
        statement_repo: StatementRepository,
    ):
        self.uow = uow
        self.work_entry_repo = work_entry_repo
        self.statement_repo = statement_repo

    async def execute(
        self, command: GenerateStatementCommandDTO, principal: Optional[Principal]
    ) -> Result[TenantStatementsResponseDTO]:
        try:
            # Step 1: Authorize
            role_check = require_company_role(principal)
            if role_check.is_err():
                return role_check

            access = authorize(principal, command.tenant_id)
            if access.is_err():
                return access

            # Step 2: Resolve period
            period_result = resolve_period(command.year, command.week_number)
            if period_result.is_err():
                return period_result
            week, period = period_result.value

            # Step 3: Sum entries per contractor
            sums_result = await SumForPeriod(self.work_entry_repo).execute(
                tenant_id=command.tenant_id,
                start_date=period.start_date,
                end_date=period.end_date,
            )
            if sums_result.is_err():
                return sums_result

            # Step 4: Upsert per contractor
            response = TenantStatementsResponseDTO(
                tenant_id=command.tenant_id,
                year=week.year,
                week_number=week.week_number,
            )

            for period_sum in sums_result.value:
                statement, locked = await upsert_period_statement(
                    self.uow,
                    self.statement_repo,
                    tenant_id=command.tenant_id,
                    contractor_id=period_sum.contractor_id,
                    year=week.year,
                    week_number=week.week_number,
                    total_amount=period_sum.total,
                    currency=period_sum.currency,
                )
                if locked:
                    response.locked.append(statement.id)
                else:
                    response.statements.append(statement_to_dto(statement))

            logger.info(
                f"Generated {len(response.statements)} statements for tenant {command.tenant_id} "
                f"{week.year}-W{week.week_number:02d} ({len(response.locked)} locked)"
            )

            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Statement generation failed for tenant {command.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="GENERATE_STATEMENTS_FAILED",
                    message="Failed to generate statements",
                    reason=str(e),
                )
            )
