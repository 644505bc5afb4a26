"""ListContractors Use Case"""

from typing import Optional
from src.libs.result import Result, Return
from src.app.security.tenant_guard import authorize, require_company_role
from src.app.repositories.contractor_repository import ContractorRepository
from src.domain.principal import Principal
from .dtos import ListContractorsResponseDTO
from .mappers import contractor_to_dto


class ListContractors:
    """Company roles list the contractors registered under their tenant."""

    def __init__(self, contractor_repo: ContractorRepository):
        self.contractor_repo = contractor_repo

    async def execute(
        self, principal: Optional[Principal], tenant_id: Optional[str]
    ) -> Result[ListContractorsResponseDTO]:
        role_check = require_company_role(principal)
        if role_check.is_err():
            return role_check

        access = authorize(principal, tenant_id)
        if access.is_err():
            return access

        contractors = await self.contractor_repo.list_by_tenant(tenant_id)
        return Return.ok(
            ListContractorsResponseDTO(contractors=[contractor_to_dto(c) for c in contractors])
        )
