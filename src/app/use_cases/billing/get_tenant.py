"""GetTenant Use Case"""

from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_principal
from src.app.repositories.tenant_repository import TenantRepository
from src.domain.principal import Principal
from .dtos import TenantDTO
from .mappers import tenant_to_dto


class GetTenant:
    """
    Use case: Read one tenant

    Company roles read their own tenant. Contractors read the tenant they
    work for.
    """

    def __init__(self, tenant_repo: TenantRepository):
        self.tenant_repo = tenant_repo

    async def execute(self, principal: Optional[Principal], tenant_id: str) -> Result[TenantDTO]:
        auth = require_principal(principal)
        if auth.is_err():
            return auth

        access = authorize(principal, tenant_id, principal.contractor_id)
        if access.is_err():
            return access

        tenant = await self.tenant_repo.get_by_id(tenant_id)
        if not tenant:
            return Return.err(
                Error(
                    code=errors.TENANT_NOT_FOUND,
                    message=f"Tenant {tenant_id} not found",
                    reason="Unknown tenant",
                )
            )

        return Return.ok(tenant_to_dto(tenant))
