"""RenderInvoicePdf Use Case

Renders the issued invoice of a statement as a PDF document.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_principal
from src.app.services.pdf_service import PdfService
from src.app.repositories.contractor_repository import ContractorRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.statement_repository import StatementRepository
from src.app.repositories.tenant_repository import TenantRepository
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.iso_week import week_date_range
from src.domain.principal import Principal
from .dtos import InvoicePdfDTO

logger = logging.getLogger(__name__)


class RenderInvoicePdf:
    """
    Use Case: Render invoice PDF

    Business Rules:
    1. Same access rules as reading the invoice
    2. Totals come from the invoice snapshot, never recomputed
    3. Rendering does not write anything

    Flow:
    1. Authenticate, load statement, authorize
    2. Load invoice, tenant, contractor and period entries
    3. Render via PdfService
    """

    def __init__(
        self,
        statement_repo: StatementRepository,
        invoice_repo: InvoiceRepository,
        tenant_repo: TenantRepository,
        contractor_repo: ContractorRepository,
        work_entry_repo: WorkEntryRepository,
        pdf_service: PdfService,
        vat_rate_label: str = "21%",
    ):
        self.statement_repo = statement_repo
        self.invoice_repo = invoice_repo
        self.tenant_repo = tenant_repo
        self.contractor_repo = contractor_repo
        self.work_entry_repo = work_entry_repo
        self.pdf_service = pdf_service
        self.vat_rate_label = vat_rate_label

    async def execute(
        self, statement_id: str, principal: Optional[Principal]
    ) -> Result[InvoicePdfDTO]:
        try:
            # Step 1: Authenticate, load, authorize
            authenticated = require_principal(principal)
            if authenticated.is_err():
                return authenticated

            statement = await self.statement_repo.get_by_id(statement_id)
            if not statement:
                return Return.err(errors.statement_not_found(statement_id))

            access = authorize(principal, statement.tenant_id, statement.contractor_id)
            if access.is_err():
                return access

            # Step 2: Load collaborators
            invoice = await self.invoice_repo.get_by_statement_id(statement_id)
            if not invoice:
                return Return.err(
                    Error(
                        code=errors.INVOICE_NOT_FOUND,
                        message=f"No invoice issued for statement {statement_id}",
                        reason="Statement not invoiced yet",
                    )
                )

            tenant = await self.tenant_repo.get_by_id(statement.tenant_id)
            if not tenant:
                return Return.err(
                    Error(
                        code=errors.TENANT_NOT_FOUND,
                        message=f"Tenant {statement.tenant_id} not found",
                        reason="Tenant removed after invoicing",
                    )
                )

            contractor = await self.contractor_repo.get_by_id(statement.contractor_id)
            if not contractor:
                return Return.err(
                    Error(
                        code=errors.CONTRACTOR_NOT_FOUND,
                        message=f"Contractor {statement.contractor_id} not found",
                        reason="Contractor removed after invoicing",
                    )
                )

            period = week_date_range(statement.year, statement.week_number)
            entries = await self.work_entry_repo.list_for_period(
                tenant_id=statement.tenant_id,
                start_date=period.start_date,
                end_date=period.end_date,
                contractor_id=statement.contractor_id,
            )

            # Step 3: Render
            pdf_bytes = self.pdf_service.generate_invoice(
                invoice=invoice,
                statement=statement,
                tenant=tenant,
                contractor=contractor,
                work_entries=entries,
                vat_rate_label=self.vat_rate_label,
            )

            return Return.ok(
                InvoicePdfDTO(
                    invoice_number=invoice.invoice_number,
                    filename=f"{invoice.invoice_number}.pdf",
                    content=pdf_bytes,
                )
            )

        except Exception as e:
            logger.error(f"PDF rendering failed for statement {statement_id}: {e}")
            return Return.err(
                Error(
                    code="RENDER_INVOICE_PDF_FAILED",
                    message="Failed to render invoice PDF",
                    reason=str(e),
                )
            )
