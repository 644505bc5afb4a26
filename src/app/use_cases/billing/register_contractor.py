"""RegisterContractor Use Case

Adds a contractor to a tenant.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_company_role
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.contractor_repository import ContractorRepository
from src.app.repositories.tenant_repository import TenantRepository
from src.domain.contractor import Contractor
from src.domain.principal import Principal
from .dtos import ContractorDTO, RegisterContractorCommandDTO
from .mappers import contractor_to_dto

logger = logging.getLogger(__name__)


class RegisterContractor:
    """
    Use Case: Register contractor

    Business Rules:
    1. company_admin only, within their own tenant
    2. Tenant must exist
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tenant_repo: TenantRepository,
        contractor_repo: ContractorRepository,
    ):
        self.uow = uow
        self.tenant_repo = tenant_repo
        self.contractor_repo = contractor_repo

    async def execute(
        self, command: RegisterContractorCommandDTO, principal: Optional[Principal]
    ) -> Result[ContractorDTO]:
        try:
            role_check = require_company_role(principal, admin_only=True)
            if role_check.is_err():
                return role_check

            access = authorize(principal, command.tenant_id)
            if access.is_err():
                return access

            tenant = await self.tenant_repo.get_by_id(command.tenant_id)
            if not tenant:
                return Return.err(
                    Error(
                        code=errors.TENANT_NOT_FOUND,
                        message=f"Tenant {command.tenant_id} not found",
                        reason="Unknown tenant",
                    )
                )

            contractor = Contractor(
                tenant_id=command.tenant_id,
                full_name=command.full_name.strip(),
                email=command.email,
                phone=command.phone,
                external_ref=command.external_ref,
            )
            created = await self.contractor_repo.create(contractor)
            await self.uow.commit()

            logger.info(f"Registered contractor {created.id} for tenant {created.tenant_id}")

            return Return.ok(contractor_to_dto(created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to register contractor for tenant {command.tenant_id}: {e}")
            return Return.err(
                Error(
                    code="REGISTER_CONTRACTOR_FAILED",
                    message="Failed to register contractor",
                    reason=str(e),
                )
            )
