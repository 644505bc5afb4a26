"""GetInvoiceForStatement Use Case"""

from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_principal
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.statement_repository import StatementRepository
from src.domain.principal import Principal
from .dtos import InvoiceResponseDTO
from .mappers import invoice_to_dto


class GetInvoiceForStatement:
    """
    Use case: Look up the invoice issued for a statement

    Reads the stored snapshot; nothing is recomputed.
    """

    def __init__(self, statement_repo: StatementRepository, invoice_repo: InvoiceRepository):
        self.statement_repo = statement_repo
        self.invoice_repo = invoice_repo

    async def execute(
        self, statement_id: str, principal: Optional[Principal]
    ) -> Result[InvoiceResponseDTO]:
        authenticated = require_principal(principal)
        if authenticated.is_err():
            return authenticated

        statement = await self.statement_repo.get_by_id(statement_id)
        if not statement:
            return Return.err(errors.statement_not_found(statement_id))

        access = authorize(principal, statement.tenant_id, statement.contractor_id)
        if access.is_err():
            return access

        invoice = await self.invoice_repo.get_by_statement_id(statement_id)
        if not invoice:
            return Return.err(
                Error(
                    code=errors.INVOICE_NOT_FOUND,
                    message=f"No invoice issued for statement {statement_id}",
                    reason="Statement not invoiced yet",
                )
            )

        return Return.ok(invoice_to_dto(invoice, statement, is_existing=True))
