"""Tenant API Routes"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.dependencies import get_principal
from src.api.error import ClientError
from src.api.schemas.billing_request import RegisterTenantRequestSchema
from src.app.use_cases.billing.dtos import RegisterTenantCommandDTO, TenantDTO
from src.app.use_cases.billing.register_tenant import RegisterTenant
from src.app.use_cases.billing.get_tenant import GetTenant
from src.adapter.repositories.tenant_repository import SqlAlchemyTenantRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.principal import Principal

router = APIRouter(prefix="/tenants", tags=["Tenants"])


@router.post(
    "",
    response_model=TenantDTO,
    status_code=status.HTTP_201_CREATED,
)
async def register_tenant(
    request: RegisterTenantRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Register a hiring company.

    Sign-up step run by the gateway before any principal exists for the
    tenant, so no principal headers are required.

    **Returns:**
    - 201: Tenant created
    - 400: Blank name
    """
    use_case = RegisterTenant(SqlAlchemyUnitOfWork(session), SqlAlchemyTenantRepository(session))

    command = RegisterTenantCommandDTO(**request.model_dump())
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{tenant_id}",
    response_model=TenantDTO,
    status_code=status.HTTP_200_OK,
)
async def get_tenant(
    tenant_id: str,
    session: AsyncSession = Depends(get_session),
    principal: Optional[Principal] = Depends(get_principal),
):
    use_case = GetTenant(SqlAlchemyTenantRepository(session))
    result = await use_case.execute(principal, tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
