"""RegisterTenant Use Case

Creates a hiring company. Called once at sign-up, before any principal for
the new tenant can exist.
"""

import logging
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.tenant_repository import TenantRepository
from src.domain.tenant import Tenant
from .dtos import RegisterTenantCommandDTO, TenantDTO
from .mappers import tenant_to_dto

logger = logging.getLogger(__name__)


def _clean(value):
    if value is None:
        return None
    return value.strip() or None


class RegisterTenant:
    """
    Use Case: Register tenant

    Business Rules:
    1. Name is required and must not be blank
    2. Optional contact fields are stored trimmed, blanks as null
    """

    def __init__(self, uow: UnitOfWork, tenant_repo: TenantRepository):
        self.uow = uow
        self.tenant_repo = tenant_repo

    async def execute(self, command: RegisterTenantCommandDTO) -> Result[TenantDTO]:
        name = command.name.strip()
        if not name:
            return Return.err(
                errors.validation_error("Tenant name is required", reason="Blank name")
            )

        try:
            tenant = Tenant(
                name=name,
                kvk_number=_clean(command.kvk_number),
                btw_number=_clean(command.btw_number),
                email=_clean(command.email),
                phone=_clean(command.phone),
            )
            created = await self.tenant_repo.create(tenant)
            await self.uow.commit()

            logger.info(f"Registered tenant {created.id} ({created.name})")

            return Return.ok(tenant_to_dto(created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to register tenant {name}: {e}")
            return Return.err(
                Error(
                    code="REGISTER_TENANT_FAILED",
                    message="Failed to register tenant",
                    reason=str(e),
                )
            )
