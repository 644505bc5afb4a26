"""BTW API Routes"""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.dependencies import get_principal
from src.api.error import ClientError
from src.app.use_cases.billing.btw_overview import BtwOverview
from src.app.use_cases.billing.dtos import BtwOverviewDTO
from src.adapter.repositories.expense_repository import SqlAlchemyExpenseRepository
from src.adapter.repositories.work_entry_repository import SqlAlchemyWorkEntryRepository
from src.depends import get_session
from src.domain.principal import Principal

router = APIRouter(prefix="/btw", tags=["BTW"])


@router.get(
    "/overview",
    response_model=BtwOverviewDTO,
    status_code=status.HTTP_200_OK,
)
async def btw_overview(
    period: str = Query(..., description="month, quarter or year"),
    year: int = Query(..., description="Calendar year (2000-2100)"),
    value: Optional[int] = Query(default=None, description="Month 1-12 or quarter 1-4"),
    tenant_id: Optional[str] = Query(default=None),
    contractor_id: Optional[str] = Query(default=None),
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """
    Revenue, BTW due and net amount for a month, quarter or year.

    Narrowed to one contractor, the overview also offsets the BTW paid on
    that contractor's expenses.

    **Returns:**
    - 200: Overview
    - 400: Unknown period, year out of range, bad month/quarter or mixed currencies
    - 401/403: Missing principal or scope mismatch
    """
    use_case = BtwOverview(
        SqlAlchemyWorkEntryRepository(session),
        SqlAlchemyExpenseRepository(session),
        vat_rate=Decimal(ApplicationConfig.VAT_RATE),
        default_currency=ApplicationConfig.DEFAULT_CURRENCY,
    )
    result = await use_case.execute(
        principal,
        tenant_id=tenant_id,
        period=period,
        year=year,
        value=value,
        contractor_id=contractor_id,
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value
