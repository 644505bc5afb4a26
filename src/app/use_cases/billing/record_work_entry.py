"""RecordWorkEntry Use Case

Appends one unit of delivered work to the tenant's ledger.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_company_role
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.contractor_repository import ContractorRepository
from src.app.repositories.tenant_repository import TenantRepository
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.principal import Principal
from src.domain.work_entry import TariffType, WorkEntry
from .dtos import RecordWorkEntryCommandDTO, WorkEntryDTO
from .mappers import work_entry_to_dto

logger = logging.getLogger(__name__)


class RecordWorkEntry:
    """
    Use Case: Record a work entry

    Business Rules:
    1. Company roles only, scoped to their own tenant
    2. tariff_type is one of stop, hour, location, point, project
    3. quantity is finite and > 0, unit_price is finite and >= 0
    4. currency is a 3-letter code
    5. Tenant exists, contractor exists and belongs to the tenant
    6. Entries are never updated afterwards

    Flow:
    1. Authorize principal
    2. Validate values
    3. Verify tenant and contractor ownership
    4. Insert entry
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tenant_repo: TenantRepository,
        contractor_repo: ContractorRepository,
        work_entry_repo: WorkEntryRepository,
    ):
        self.uow = uow
        self.tenant_repo = tenant_repo
        self.contractor_repo = contractor_repo
        self.work_entry_repo = work_entry_repo

    async def execute(
        self, command: RecordWorkEntryCommandDTO, principal: Optional[Principal]
    ) -> Result[WorkEntryDTO]:
        try:
            # Step 1: Authorize
            role_check = require_company_role(principal)
            if role_check.is_err():
                return role_check

            access = authorize(principal, command.tenant_id)
            if access.is_err():
                return access

            # Step 2: Validate values
            try:
                tariff_type = TariffType(command.tariff_type)
            except ValueError:
                allowed = ", ".join(t.value for t in TariffType)
                return Return.err(
                    errors.validation_error(
                        f"tariff_type must be one of: {allowed}",
                        reason=f"tariff_type={command.tariff_type!r}",
                    )
                )

            if not command.quantity.is_finite() or command.quantity <= 0:
                return Return.err(
                    errors.validation_error(
                        "quantity must be a finite number greater than 0",
                        reason=f"quantity={command.quantity}",
                    )
                )

            if not command.unit_price.is_finite() or command.unit_price < 0:
                return Return.err(
                    errors.validation_error(
                        "unit_price must be a finite number of at least 0",
                        reason=f"unit_price={command.unit_price}",
                    )
                )

            currency = command.currency.upper()
            if len(currency) != 3 or not currency.isalpha():
                return Return.err(
                    errors.validation_error(
                        "currency must be a 3-letter ISO 4217 code",
                        reason=f"currency={command.currency!r}",
                    )
                )

            # Step 3: Verify ownership
            tenant = await self.tenant_repo.get_by_id(command.tenant_id)
            if not tenant:
                return Return.err(
                    errors.validation_error(
                        f"Tenant {command.tenant_id} does not exist",
                        reason="Unknown tenant",
                    )
                )

            contractor = await self.contractor_repo.get_by_id(command.contractor_id)
            if not contractor or contractor.tenant_id != command.tenant_id:
                return Return.err(
                    errors.validation_error(
                        f"Contractor {command.contractor_id} does not belong to tenant {command.tenant_id}",
                        reason="Unknown contractor or cross-tenant reference",
                    )
                )

            # Step 4: Insert entry
            entry = WorkEntry(
                tenant_id=command.tenant_id,
                contractor_id=command.contractor_id,
                work_date=command.work_date,
                tariff_type=tariff_type,
                quantity=command.quantity,
                unit_price=command.unit_price,
                currency=currency,
                notes=command.notes,
            )
            created_entry = await self.work_entry_repo.create(entry)

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Recorded work entry {created_entry.id} for contractor {created_entry.contractor_id} "
                f"on {created_entry.work_date}"
            )

            return Return.ok(work_entry_to_dto(created_entry))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to record work entry: {e}")
            return Return.err(
                Error(
                    code="RECORD_WORK_ENTRY_FAILED",
                    message="Failed to record work entry",
                    reason=str(e),
                )
            )
