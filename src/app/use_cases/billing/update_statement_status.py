"""UpdateStatementStatus Use Case

Moves a statement forward through its lifecycle.
"""

import logging
from typing import Optional
from src.libs.result import Result, Return, Error
from src.app import errors
from src.app.security.tenant_guard import authorize, require_company_role
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.statement_repository import StatementRepository
from src.domain.principal import Principal
from src.domain.statement import StatementStatus
from src.domain.statement_lifecycle import InvalidTransitionError, StatementLifecycle
from .dtos import StatementDTO, UpdateStatementStatusCommandDTO
from .mappers import statement_to_dto

logger = logging.getLogger(__name__)


class UpdateStatementStatus:
    """
    Use Case: Change statement status

    Business Rules:
    1. Company roles only, within their tenant (contractors get FORBIDDEN)
    2. Unknown status values are VALIDATION_ERROR
    3. Only forward transitions; backward or same-status is INVALID_TRANSITION

    Flow:
    1. Authorize role
    2. Parse target status
    3. Load statement with lock and check tenant scope
    4. Validate transition
    5. Persist and commit
    """

    def __init__(self, uow: UnitOfWork, statement_repo: StatementRepository):
        self.uow = uow
        self.statement_repo = statement_repo

    async def execute(
        self, command: UpdateStatementStatusCommandDTO, principal: Optional[Principal]
    ) -> Result[StatementDTO]:
        try:
            # Step 1: Authorize role
            role_check = require_company_role(principal)
            if role_check.is_err():
                return role_check

            # Step 2: Parse target status
            try:
                new_status = StatementStatus(command.status)
            except ValueError:
                allowed = ", ".join(s.value for s in StatementStatus)
                return Return.err(
                    errors.validation_error(
                        f"status must be one of: {allowed}",
                        reason=f"status={command.status!r}",
                    )
                )

            # Step 3: Load statement
            statement = await self.statement_repo.get_by_id(command.statement_id, for_update=True)
            if not statement:
                return Return.err(errors.statement_not_found(command.statement_id))

            access = authorize(principal, statement.tenant_id)
            if access.is_err():
                return access

            # Step 4: Validate transition
            old_status = StatementStatus(statement.status)
            try:
                StatementLifecycle.validate_transition(old_status, new_status)
            except InvalidTransitionError as e:
                return Return.err(
                    Error(
                        code=errors.INVALID_TRANSITION,
                        message=str(e),
                        reason=f"allowed: {[s.value for s in StatementLifecycle.get_next_statuses(old_status)]}",
                    )
                )

            # Step 5: Persist
            statement.status = new_status
            updated = await self.statement_repo.update(statement)
            await self.uow.commit()

            logger.info(
                f"Statement {updated.id} status {old_status.value} -> {new_status.value}"
            )

            return Return.ok(statement_to_dto(updated))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Status update failed for statement {command.statement_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_STATEMENT_STATUS_FAILED",
                    message="Failed to update statement status",
                    reason=str(e),
                )
            )
