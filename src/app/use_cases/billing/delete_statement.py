"""DeleteStatement Use Case

Administrative removal of a statement that was never invoiced.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_company_role
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.statement_repository import StatementRepository
from src.domain.principal import Principal

logger = logging.getLogger(__name__)


class DeleteStatement:
    """
    Use Case: Delete a statement

    Business Rules:
    1. company_admin only, within their tenant
    2. A statement with an issued invoice cannot be deleted (STATEMENT_INVOICED)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        statement_repo: StatementRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.statement_repo = statement_repo
        self.invoice_repo = invoice_repo

    async def execute(self, statement_id: str, principal: Optional[Principal]) -> Result[None]:
        try:
            role_check = require_company_role(principal, admin_only=True)
            if role_check.is_err():
                return role_check

            statement = await self.statement_repo.get_by_id(statement_id, for_update=True)
            if not statement:
                return Return.err(errors.statement_not_found(statement_id))

            access = authorize(principal, statement.tenant_id)
            if access.is_err():
                return access

            invoice = await self.invoice_repo.get_by_statement_id(statement_id)
            if invoice:
                return Return.err(
                    Error(
                        code=errors.STATEMENT_INVOICED,
                        message=f"Statement {statement_id} has invoice {invoice.invoice_number} "
                                f"and cannot be deleted",
                        reason=f"invoice_id={invoice.id}",
                    )
                )

            await self.statement_repo.delete(statement)
            await self.uow.commit()

            logger.info(f"Deleted statement {statement_id}")

            return Return.ok()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete statement {statement_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_STATEMENT_FAILED",
                    message="Failed to delete statement",
                    reason=str(e),
                )
            )
