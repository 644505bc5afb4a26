"""Work Entry API Routes"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.dependencies import get_principal
from src.api.error import ClientError
from src.api.schemas.billing_request import RecordWorkEntryRequestSchema
from src.app.use_cases.billing.dtos import (
    ListWorkEntriesResponseDTO,
    RecordWorkEntryCommandDTO,
    WorkEntryDTO,
)
from src.app.use_cases.billing.record_work_entry import RecordWorkEntry
from src.app.use_cases.billing.list_work_entries import ListWorkEntries
from src.adapter.repositories.contractor_repository import SqlAlchemyContractorRepository
from src.adapter.repositories.tenant_repository import SqlAlchemyTenantRepository
from src.adapter.repositories.work_entry_repository import SqlAlchemyWorkEntryRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.principal import Principal

router = APIRouter(prefix="/work-entries", tags=["Work Entries"])


@router.post(
    "",
    response_model=WorkEntryDTO,
    status_code=status.HTTP_201_CREATED,
)
async def record_work_entry(
    request: RecordWorkEntryRequestSchema,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """
    Record delivered work for a contractor (company roles only).

    Entries are immutable once recorded.

    **Returns:**
    - 201: Entry recorded
    - 400: Unknown tariff type, non-positive quantity, negative price,
      bad currency or contractor outside the tenant
    - 401/403: Missing principal, contractor principal or tenant mismatch
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RecordWorkEntry(
        uow,
        SqlAlchemyTenantRepository(session),
        SqlAlchemyContractorRepository(session),
        SqlAlchemyWorkEntryRepository(session),
    )

    command = RecordWorkEntryCommandDTO(**request.model_dump())
    result = await use_case.execute(command, principal)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=ListWorkEntriesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_work_entries(
    tenant_id: Optional[str] = Query(default=None),
    contractor_id: Optional[str] = Query(default=None),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of entries"),
    offset: int = Query(default=0, ge=0, description="Number of entries to skip"),
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    use_case = ListWorkEntries(SqlAlchemyWorkEntryRepository(session))
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
