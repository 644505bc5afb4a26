"""Invoice API Routes

FastAPI routes for legal invoice issuance and retrieval.
"""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.dependencies import get_principal
from src.api.error import ClientError
from src.api.schemas.billing_request import IssueInvoiceRequestSchema
from src.app.use_cases.billing.dtos import InvoiceResponseDTO, IssueInvoiceCommandDTO
from src.app.use_cases.billing.issue_invoice import IssueInvoice
from src.app.use_cases.billing.get_invoice_for_statement import GetInvoiceForStatement
from src.app.use_cases.billing.render_invoice_pdf import RenderInvoicePdf
from src.adapter.repositories.contractor_repository import SqlAlchemyContractorRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.statement_repository import SqlAlchemyStatementRepository
from src.adapter.repositories.tenant_repository import SqlAlchemyTenantRepository
from src.adapter.repositories.work_entry_repository import SqlAlchemyWorkEntryRepository
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.principal import Principal

router = APIRouter(prefix="/invoices", tags=["Invoices"])


def vat_rate_label() -> str:
    percent = (Decimal(ApplicationConfig.VAT_RATE) * 100).normalize()
    return f"{percent:f}%"


@router.post(
    "/generate",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"description": "Invoice already issued for this statement (is_existing=true)"},
        404: {
            "description": "Statement not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "STATEMENT_NOT_FOUND",
                            "message": "Statement 6f1c2d7e-8a52-4a8e-9d0c-3b1c1f0d2a11 not found"
                        }
                    }
                }
            }
        }
    }
)
async def issue_invoice(
    request: IssueInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """
    Issue the legal invoice for a statement.

    Exactly one invoice exists per statement. Concurrent or repeated
    requests all receive the same invoice; only the first gets 201.

    **Request body:**
    - `statement_id` (required): Statement to invoice

    **Example response:**
    ```json
    {
      "invoice_id": "9a0e7b6c-5d4f-4e3a-8b2c-1d0e9f8a7b6c",
      "invoice_number": "FACT-2025-0001",
      "is_existing": false,
      "statement_id": "6f1c2d7e-8a52-4a8e-9d0c-3b1c1f0d2a11",
      "year": 2024,
      "week_number": 48,
      "subtotal": "600.00",
      "tax": "126.00",
      "total": "726.00",
      "currency": "EUR"
    }
    ```

    **Returns:**
    - 201: Invoice issued
    - 200: Invoice already existed
    - 401/403: Missing principal or out-of-scope statement
    - 404: Statement not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = IssueInvoice(
        uow,
        SqlAlchemyStatementRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyWorkEntryRepository(session),
        vat_rate=Decimal(ApplicationConfig.VAT_RATE),
        number_prefix=ApplicationConfig.INVOICE_NUMBER_PREFIX,
        max_attempts=ApplicationConfig.INVOICE_ISSUE_MAX_ATTEMPTS,
    )

    command = IssueInvoiceCommandDTO(statement_id=request.statement_id)
    result = await use_case.execute(command, principal)

    if result.is_err():
        raise ClientError(result.error)

    invoice = result.value
    if invoice.is_existing:
        return JSONResponse(status_code=status.HTTP_200_OK, content=invoice.model_dump(mode="json"))

    return invoice


@router.get(
    "/by-statement/{statement_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_invoice_for_statement(
    statement_id: str,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    use_case = GetInvoiceForStatement(
        SqlAlchemyStatementRepository(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(statement_id, principal)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/by-statement/{statement_id}/pdf",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def get_invoice_pdf(
    statement_id: str,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """
    Download the issued invoice as PDF.

    Amounts are taken from the invoice as issued.
    """
    use_case = RenderInvoicePdf(
        SqlAlchemyStatementRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyTenantRepository(session),
        SqlAlchemyContractorRepository(session),
        SqlAlchemyWorkEntryRepository(session),
        ReportLabPdfService(),
        vat_rate_label=vat_rate_label(),
    )
    result = await use_case.execute(statement_id, principal)

    if result.is_err():
        raise ClientError(result.error)

    pdf = result.value
    return Response(
        content=pdf.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf.filename}"'},
    )
