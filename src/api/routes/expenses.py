"""Expense API Routes"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.dependencies import get_principal
from src.api.error import ClientError
from src.api.schemas.billing_request import RecordExpenseRequestSchema
from src.app.use_cases.billing.dtos import (
    ExpenseDTO,
    ListExpensesResponseDTO,
    RecordExpenseCommandDTO,
)
from src.app.use_cases.billing.record_expense import RecordExpense
from src.app.use_cases.billing.list_expenses import ListExpenses
from src.app.use_cases.billing.delete_expense import DeleteExpense
from src.adapter.repositories.contractor_repository import SqlAlchemyContractorRepository
from src.adapter.repositories.expense_repository import SqlAlchemyExpenseRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.principal import Principal

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.post(
    "",
    response_model=ExpenseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def record_expense(
    request: RecordExpenseRequestSchema,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """
    Log a deductible cost for a contractor.

    **Returns:**
    - 201: Expense recorded
    - 400: Non-positive amount, bad currency or contractor outside the tenant
    - 401/403: Missing principal or scope mismatch
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RecordExpense(
        uow,
        SqlAlchemyContractorRepository(session),
        SqlAlchemyExpenseRepository(session),
    )

    command = RecordExpenseCommandDTO(**request.model_dump())
    result = await use_case.execute(command, principal)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=ListExpensesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_expenses(
    tenant_id: Optional[str] = Query(default=None),
    contractor_id: Optional[str] = Query(default=None),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of expenses"),
    offset: int = Query(default=0, ge=0, description="Number of expenses to skip"),
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    use_case = ListExpenses(SqlAlchemyExpenseRepository(session))
    result = await use_case.execute(
        principal,
        tenant_id=tenant_id,
        contractor_id=contractor_id,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_expense(
    expense_id: str,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    use_case = DeleteExpense(SqlAlchemyUnitOfWork(session), SqlAlchemyExpenseRepository(session))
    result = await use_case.execute(expense_id, principal)

    if result.is_err():
        raise ClientError(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
