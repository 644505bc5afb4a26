"""Statement API Routes

FastAPI routes for weekly statement aggregation and lifecycle.
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.dependencies import get_principal
from src.api.error import ClientError
from src.api.schemas.billing_request import (
    GenerateStatementRequestSchema,
    UpdateStatementStatusRequestSchema,
)
from src.app.use_cases.billing.dtos import (
    GenerateStatementCommandDTO,
    ListStatementsResponseDTO,
    StatementDTO,
    TenantStatementsResponseDTO,
    UpdateStatementStatusCommandDTO,
)
from src.app.use_cases.billing.generate_statement import GenerateStatement
from src.app.use_cases.billing.generate_tenant_statements import GenerateTenantStatements
from src.app.use_cases.billing.list_statements import ListStatements
from src.app.use_cases.billing.get_statement import GetStatement
from src.app.use_cases.billing.update_statement_status import UpdateStatementStatus
from src.app.use_cases.billing.delete_statement import DeleteStatement
from src.adapter.repositories.contractor_repository import SqlAlchemyContractorRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.statement_repository import SqlAlchemyStatementRepository
from src.adapter.repositories.work_entry_repository import SqlAlchemyWorkEntryRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.principal import Principal

router = APIRouter(prefix="/statements", tags=["Statements"])


@router.post(
    "/generate",
    response_model=Union[StatementDTO, TenantStatementsResponseDTO],
    status_code=status.HTTP_200_OK,
    responses={
        409: {
            "description": "Statement already invoiced or paid",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "STATEMENT_LOCKED",
                            "message": "Statement for 2024-W48 is invoiced and can no longer be regenerated"
                        }
                    }
                }
            }
        },
        400: {
            "description": "Invalid week or mixed currencies",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Week 53 does not exist in ISO year 2025"
                        }
                    }
                }
            }
        }
    }
)
async def generate_statements(
    request: GenerateStatementRequestSchema,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """
    Aggregate work entries into weekly statements.

    Re-running for the same week is safe: the existing statement is updated
    in place (same id, same total when entries are unchanged). Invoiced and
    paid statements are never modified.

    **Request body:**
    - `tenant_id` (required): Tenant identifier
    - `contractor_id` (optional): Aggregate a single contractor; omitted means
      every contractor with entries in the week
    - `year`, `week_number` (optional): ISO week, each defaults to the current one

    **Returns:**
    - 200: The statement (single contractor) or `{statements, locked}` (tenant-wide)
    - 400: Invalid week or mixed currencies
    - 403: Tenant mismatch or contractor principal
    - 404: Contractor not found
    - 409: Statement is invoiced or paid (single contractor)
    """
    uow = SqlAlchemyUnitOfWork(session)
    work_entry_repo = SqlAlchemyWorkEntryRepository(session)
    statement_repo = SqlAlchemyStatementRepository(session)

    command = GenerateStatementCommandDTO(
        tenant_id=request.tenant_id,
        contractor_id=request.contractor_id,
        year=request.year,
        week_number=request.week_number,
    )

    if command.contractor_id:
        contractor_repo = SqlAlchemyContractorRepository(session)
        use_case = GenerateStatement(
            uow,
            contractor_repo,
            work_entry_repo,
            statement_repo,
            default_currency=ApplicationConfig.DEFAULT_CURRENCY,
        )
    else:
        use_case = GenerateTenantStatements(uow, work_entry_repo, statement_repo)

    result = await use_case.execute(command, principal)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=ListStatementsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_statements(
    tenant_id: Optional[str] = Query(default=None, description="Tenant identifier"),
    contractor_id: Optional[str] = Query(default=None, description="Contractor filter"),
    status_filter: Optional[str] = Query(default=None, alias="status", description="Status filter"),
    year: Optional[int] = Query(default=None, description="ISO year filter"),
    week_number: Optional[int] = Query(default=None, description="ISO week filter"),
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of statements"),
    offset: int = Query(default=0, ge=0, description="Number of statements to skip"),
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """
    List statements, newest first.

    Contractors must pass their own `contractor_id`.
    """
    use_case = ListStatements(SqlAlchemyStatementRepository(session))
    result = await use_case.execute(
        principal,
        tenant_id=tenant_id,
        contractor_id=contractor_id,
        status=status_filter,
        year=year,
        week_number=week_number,
        limit=limit,
        offset=offset,
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{statement_id}",
    response_model=StatementDTO,
    status_code=status.HTTP_200_OK,
)
async def get_statement(
    statement_id: str,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    use_case = GetStatement(SqlAlchemyStatementRepository(session))
    result = await use_case.execute(statement_id, principal)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.patch(
    "/{statement_id}",
    response_model=StatementDTO,
    status_code=status.HTTP_200_OK,
    responses={
        409: {
            "description": "Backward or same-status transition",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_TRANSITION",
                            "message": "Invalid transition from 'paid' to 'open'"
                        }
                    }
                }
            }
        }
    }
)
async def update_statement_status(
    statement_id: str,
    request: UpdateStatementStatusRequestSchema,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """
    Move a statement forward: open → approved → invoiced → paid.

    **Returns:**
    - 200: Updated statement
    - 400: Unknown status value
    - 403: Contractor principal or tenant mismatch
    - 404: Statement not found
    - 409: Backward or same-status transition
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateStatementStatus(uow, SqlAlchemyStatementRepository(session))

    command = UpdateStatementStatusCommandDTO(statement_id=statement_id, status=request.status)
    result = await use_case.execute(command, principal)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{statement_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        409: {
            "description": "Statement has an invoice",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "STATEMENT_INVOICED",
                            "message": "Statement has invoice FACT-2025-0001 and cannot be deleted"
                        }
                    }
                }
            }
        }
    }
)
async def delete_statement(
    statement_id: str,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """Delete a statement that was never invoiced (company_admin only)."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteStatement(
        uow,
        SqlAlchemyStatementRepository(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(statement_id, principal)

    if result.is_err():
        raise ClientError(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
