"""Contractor API Routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.dependencies import get_principal
from src.api.error import ClientError
from src.api.schemas.billing_request import RegisterContractorRequestSchema
from src.app.use_cases.billing.dtos import (
    ContractorDTO,
    ListContractorsResponseDTO,
    RegisterContractorCommandDTO,
)
from src.app.use_cases.billing.register_contractor import RegisterContractor
from src.app.use_cases.billing.list_contractors import ListContractors
from src.adapter.repositories.contractor_repository import SqlAlchemyContractorRepository
from src.adapter.repositories.tenant_repository import SqlAlchemyTenantRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.principal import Principal

router = APIRouter(prefix="/contractors", tags=["Contractors"])


@router.post(
    "",
    response_model=ContractorDTO,
    status_code=status.HTTP_201_CREATED,
)
async def register_contractor(
    request: RegisterContractorRequestSchema,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    """Register a contractor under the caller's tenant (company_admin only)."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = RegisterContractor(
        uow,
        SqlAlchemyTenantRepository(session),
        SqlAlchemyContractorRepository(session),
    )

    command = RegisterContractorCommandDTO(**request.model_dump())
    result = await use_case.execute(command, principal)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=ListContractorsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_contractors(
    tenant_id: Optional[str] = Query(default=None),
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    use_case = ListContractors(SqlAlchemyContractorRepository(session))
    result = await use_case.execute(principal, tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
